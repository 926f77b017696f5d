# tests/conftest.py

import os
from decimal import Decimal
from typing import AsyncGenerator, Awaitable, Callable

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app
from app.core import dependencies as deps
from app.core.database import enable_sqlite_foreign_keys, get_session

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 모델 모듈을 임포트합니다.
from app.domains.models import *    # noqa: F401, F403
from app.domains.beer import models as beer_models
from app.domains.order import models as order_models


# --- 테스트용 데이터베이스 설정 ---
# 기본값은 메모리 SQLite입니다. PostgreSQL로 돌리려면 TEST_DATABASE_URL을 지정합니다.
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")
_is_sqlite = TEST_DATABASE_URL.startswith("sqlite")

test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,             # 테스트 시 SQL 쿼리 출력하지 않음
    future=True,
    # 메모리 SQLite는 연결마다 별도 DB이므로 하나의 연결을 공유합니다.
    **({"poolclass": StaticPool, "connect_args": {"check_same_thread": False}} if _is_sqlite else {}),
)

if _is_sqlite:
    enable_sqlite_foreign_keys(test_engine)

    # pysqlite 드라이버는 SAVEPOINT를 제대로 다루지 못하므로 트랜잭션 시작을 직접 제어합니다.
    @event.listens_for(test_engine.sync_engine, "connect")
    def _disable_pysqlite_transaction(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(test_engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


# 테스트용 세션 팩토리 생성 (AsyncSession)
# 서비스의 commit/rollback은 SAVEPOINT 안에서만 일어나고, 바깥 트랜잭션은 테스트 종료 시 롤백됩니다.
TestingSessionLocal = sessionmaker(
    autoflush=False,
    class_=AsyncSession,
    expire_on_commit=False,
    join_transaction_mode="create_savepoint",
)


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="session", autouse=True)
async def setup_database():
    """
    테스트 세션 시작 시 모든 테이블을 삭제하고 재생성합니다.
    테스트 종료 시 다시 테이블을 삭제합니다.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield  # 테스트 실행

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    각 테스트 함수마다 트랜잭션을 시작하고, 테스트 완료 후 롤백하여
    테스트 간의 격리를 보장하는 비동기 데이터베이스 세션을 제공합니다.
    """
    connection = await test_engine.connect()
    transaction = await connection.begin()
    session = TestingSessionLocal(bind=connection)

    try:
        yield session
    finally:
        await session.close()
        await transaction.rollback()
        await connection.close()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    """

    def override_get_session_and_dependency():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()

    try:
        # get_session과 deps.get_db_session 모두 오버라이드
        main_app.dependency_overrides[get_session] = override_get_session_and_dependency
        main_app.dependency_overrides[deps.get_db_session] = override_get_session_and_dependency

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client

    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 도메인별 공통 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def beer_factory(db_session: AsyncSession) -> Callable[..., Awaitable[beer_models.Beer]]:
    """
    속성을 지정하여 테스트용 맥주 레코드를 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_beer(
        beer_name: str = "Galaxy Cat",
        beer_style: str = "PALE_ALE",
        upc: str = "12356222",
        quantity_on_hand: int = 122,
        price: Decimal = Decimal("12.99"),
    ) -> beer_models.Beer:
        beer = beer_models.Beer(
            beer_name=beer_name,
            beer_style=beer_style,
            upc=upc,
            quantity_on_hand=quantity_on_hand,
            price=price,
        )
        db_session.add(beer)
        await db_session.commit()
        await db_session.refresh(beer)
        return beer
    return _create_beer


@pytest_asyncio.fixture(scope="function")
async def test_beer(beer_factory: Callable) -> beer_models.Beer:
    """기본 맥주 한 개를 생성합니다."""
    return await beer_factory()


@pytest_asyncio.fixture(scope="function")
async def test_beer_b(beer_factory: Callable) -> beer_models.Beer:
    """두 번째 맥주를 생성합니다 (라인의 맥주 변경 테스트용)."""
    return await beer_factory(beer_name="Crank", beer_style="IPA", upc="12356223", price=Decimal("9.49"))


@pytest_asyncio.fixture(scope="function")
async def test_order(db_session: AsyncSession, test_beer: beer_models.Beer) -> order_models.BeerOrder:
    """맥주 한 개를 참조하는 라인 두 개를 가진 주문을 생성합니다."""
    order = order_models.BeerOrder(customer_ref="CUST-001", payment_amount=Decimal("25.98"))
    order.lines.extend([
        order_models.BeerOrderLine(beer_id=test_beer.id, order_quantity=1),
        order_models.BeerOrderLine(beer_id=test_beer.id, order_quantity=2),
    ])
    db_session.add(order)
    await db_session.commit()
    await db_session.refresh(order)
    return order
