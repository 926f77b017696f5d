# app/domains/beer/routers.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app import API_PREFIX
from app.core import dependencies as deps
from app.domains.beer import crud as beer_crud, schemas as beer_schemas

router = APIRouter(
    tags=["Beer Management (맥주 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. beers 엔드포인트
# =============================================================================
@router.post(
    "",
    response_model=beer_schemas.BeerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_beer(
    beer_create: beer_schemas.BeerCreate,
    response: Response,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """새로운 맥주를 생성하고 Location 헤더로 조회 경로를 알려줍니다."""
    db_beer = await beer_crud.beer.create(db=db, obj_in=beer_create)
    response.headers["Location"] = f"{API_PREFIX}/beers/{db_beer.id}"
    return db_beer


@router.get("", response_model=List[beer_schemas.BeerResponse])
async def read_beers(db: AsyncSession = Depends(deps.get_db_session)):
    """모든 맥주 목록을 조회합니다. 없으면 빈 배열을 반환합니다."""
    return await beer_crud.beer.get_all(db)


@router.get("/{beer_id}", response_model=beer_schemas.BeerResponse)
async def read_beer(beer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """ID로 특정 맥주를 조회합니다."""
    db_beer = await beer_crud.beer.get(db, beer_id)
    if db_beer is None:
        raise HTTPException(status_code=404, detail=f"Beer {beer_id} not found")
    return db_beer


@router.put("/{beer_id}", response_model=beer_schemas.BeerResponse)
async def update_beer(
    beer_id: int,
    beer_update: beer_schemas.BeerUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """ID로 특정 맥주를 업데이트합니다. null 필드는 기존 값을 유지합니다."""
    db_beer = await beer_crud.beer.update_by_id(db, id=beer_id, obj_in=beer_update)
    if db_beer is None:
        raise HTTPException(status_code=404, detail=f"Beer {beer_id} not found")
    return db_beer


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beer(beer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """ID로 특정 맥주를 삭제합니다."""
    if not await beer_crud.beer.remove(db, id=beer_id):
        raise HTTPException(status_code=404, detail=f"Beer {beer_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
