# flake8: noqa
# scripts/create_beer.py

import asyncio
from decimal import Decimal, InvalidOperation

import typer
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import create_db_and_tables, get_async_session_context
from app.domains.beer import crud as beer_crud
from app.domains.beer import schemas as beer_schemas

cli = typer.Typer()


async def create_beer(db: AsyncSession, beer_in: beer_schemas.BeerCreate) -> None:
    """
    데이터베이스에 맥주 레코드를 생성하는 비동기 함수
    """
    db_beer = await beer_crud.beer.create(db, obj_in=beer_in)
    print(f"맥주가 성공적으로 생성되었습니다: {db_beer.beer_name} (id={db_beer.id})")


@cli.command()
def main(
    beer_name: str = typer.Option(
        ..., '--name', '-n',
        prompt="맥주 이름을 입력하세요",
        help="생성할 맥주의 이름입니다."
    ),
    beer_style: str = typer.Option(
        ..., '--style', '-s',
        prompt="맥주 스타일을 입력하세요",
        help="맥주 스타일입니다. (예: ALE, PALE_ALE, IPA)"
    ),
    upc: str = typer.Option(
        ..., '--upc', '-u',
        prompt="UPC를 입력하세요",
        help="Universal Product Code 입니다."
    ),
    quantity_on_hand: int = typer.Option(
        0, '--quantity', '-q',
        help="보유 수량입니다."
    ),
    price: str = typer.Option(
        ..., '--price', '-p',
        prompt="단가를 입력하세요",
        help="단가입니다. (예: 12.99)"
    ),
    create_tables: bool = typer.Option(
        False, '--create-tables',
        help="실행 전에 테이블이 없으면 생성합니다."
    ),
):
    """
    Brewery Orders 애플리케이션에 새로운 맥주 레코드를 추가합니다.
    """
    try:
        beer_price = Decimal(price)
    except InvalidOperation:
        print(f"오류: 올바른 가격이 아닙니다: {price}")
        raise typer.Abort()

    beer_data = beer_schemas.BeerCreate(
        beer_name=beer_name,
        beer_style=beer_style,
        upc=upc,
        quantity_on_hand=quantity_on_hand,
        price=beer_price,
    )

    async def run_creation():
        if create_tables:
            await create_db_and_tables()
        async with get_async_session_context() as db:
            await create_beer(db=db, beer_in=beer_data)

    asyncio.run(run_creation())


if __name__ == "__main__":
    cli()
