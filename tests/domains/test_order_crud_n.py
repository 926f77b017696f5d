# tests/domains/test_order_crud_n.py

"""
주문/맥주 서비스 계층(crud.py)을 HTTP 없이 직접 호출하여 검증하는 테스트 모듈입니다.
"""

from decimal import Decimal

import pytest
from fastapi import HTTPException
from sqlalchemy import text
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.domains.beer import models as beer_models
from app.domains.beer.crud import beer as beer_crud
from app.domains.order import models as order_models
from app.domains.order import schemas as order_schemas
from app.domains.order.crud import beer_order as order_crud


@pytest.mark.asyncio
async def test_create_order_from_dict(db_session: AsyncSession, test_beer: beer_models.Beer):
    print("\n--- Running test_create_order_from_dict ---")
    order = await order_crud.create(
        db_session,
        obj_in={"customer_ref": "DICT-1", "lines": [{"beer_id": test_beer.id, "order_quantity": 2}]},
    )

    assert order.id is not None
    assert order.status == order_models.OrderStatus.NEW
    assert len(order.lines) == 1
    assert order.lines[0].beer_order_id == order.id
    assert order.lines[0].status == order_models.LineStatus.NEW
    print("test_create_order_from_dict passed.")


@pytest.mark.asyncio
async def test_create_order_line_without_beer_id(db_session: AsyncSession):
    """
    스키마 검증을 거치지 않은 입력에서 beer_id가 없으면 서비스가 404를 발생시키는지 테스트합니다.
    """
    print("\n--- Running test_create_order_line_without_beer_id ---")
    line_in = order_schemas.BeerOrderLineCreate.model_construct(beer_id=None, order_quantity=1)
    order_in = order_schemas.BeerOrderCreate.model_construct(
        customer_ref=None, payment_amount=None, status=None, lines=[line_in]
    )

    with pytest.raises(HTTPException) as exc_info:
        await order_crud.create(db_session, obj_in=order_in)

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Beer id is required for order line"
    assert await order_crud.count(db_session) == 0
    print("test_create_order_line_without_beer_id passed.")


@pytest.mark.asyncio
async def test_add_line_without_beer_id(db_session: AsyncSession, test_order: order_models.BeerOrder):
    print("\n--- Running test_add_line_without_beer_id ---")
    order_id = test_order.id

    with pytest.raises(HTTPException) as exc_info:
        await order_crud.add_line(db_session, order_id=order_id, line_in={"beer_id": None, "order_quantity": 1})

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == f"Beer id is required for line in order {order_id}"
    print("test_add_line_without_beer_id passed.")


@pytest.mark.asyncio
async def test_replace_with_unknown_beer_keeps_existing_lines(
    db_session: AsyncSession, test_order: order_models.BeerOrder
):
    """
    PUT 입력 중 하나라도 맥주 확인에 실패하면 기존 주문이 변경되지 않는지 테스트합니다.
    """
    print("\n--- Running test_replace_with_unknown_beer_keeps_existing_lines ---")
    order_id = test_order.id
    line_ids = [line.id for line in test_order.lines]

    with pytest.raises(HTTPException) as exc_info:
        await order_crud.update_by_id(
            db_session,
            id=order_id,
            obj_in={"customer_ref": "CHANGED", "lines": [{"beer_id": 99999, "order_quantity": 1}]},
        )
    assert exc_info.value.status_code == 404

    order = await order_crud.get(db_session, order_id)
    assert order.customer_ref == "CUST-001"
    assert [line.id for line in order.lines] == line_ids
    print("test_replace_with_unknown_beer_keeps_existing_lines passed.")


@pytest.mark.asyncio
async def test_patch_ignores_null_fields(db_session: AsyncSession, test_order: order_models.BeerOrder):
    print("\n--- Running test_patch_ignores_null_fields ---")
    order = await order_crud.patch(
        db_session,
        id=test_order.id,
        obj_in=order_schemas.BeerOrderPatch(status=order_models.OrderStatus.CANCELLED),
    )

    assert order.status == order_models.OrderStatus.CANCELLED
    assert order.customer_ref == "CUST-001"
    assert order.payment_amount == Decimal("25.98")
    assert len(order.lines) == 2
    print("test_patch_ignores_null_fields passed.")


@pytest.mark.asyncio
async def test_update_line_same_beer_keeps_reference(db_session: AsyncSession, test_order: order_models.BeerOrder):
    """
    같은 맥주 id로 라인을 수정하면 참조는 유지되고 수량만 바뀌는지 테스트합니다.
    """
    print("\n--- Running test_update_line_same_beer_keeps_reference ---")
    line = test_order.lines[0]
    line_id, beer_id = line.id, line.beer_id

    order = await order_crud.update_line(
        db_session,
        order_id=test_order.id,
        line_id=line_id,
        line_in={"beer_id": beer_id, "order_quantity": 9, "quantity_allocated": None, "status": None},
    )

    updated = next(item for item in order.lines if item.id == line_id)
    assert updated.beer_id == beer_id
    assert updated.order_quantity == 9
    assert updated.quantity_allocated == 0
    assert updated.status == order_models.LineStatus.NEW
    assert updated.version == 2
    print("test_update_line_same_beer_keeps_reference passed.")


@pytest.mark.asyncio
async def test_delete_line_unknown_id_returns_order(db_session: AsyncSession, test_order: order_models.BeerOrder):
    print("\n--- Running test_delete_line_unknown_id_returns_order ---")
    order = await order_crud.delete_line(db_session, order_id=test_order.id, line_id=99999)

    assert order.id == test_order.id
    assert len(order.lines) == 2
    print("test_delete_line_unknown_id_returns_order passed.")


@pytest.mark.asyncio
async def test_remove_order_cascades_lines(db_session: AsyncSession, test_order: order_models.BeerOrder):
    print("\n--- Running test_remove_order_cascades_lines ---")
    order_id = test_order.id

    await order_crud.remove(db_session, id=order_id)

    remaining = await db_session.execute(
        text("SELECT COUNT(*) FROM beer_order_lines WHERE beer_order_id = :id"), {"id": order_id}
    )
    assert remaining.scalar_one() == 0
    with pytest.raises(HTTPException) as exc_info:
        await order_crud.remove(db_session, id=order_id)
    assert exc_info.value.status_code == 404
    print("test_remove_order_cascades_lines passed.")


@pytest.mark.asyncio
async def test_get_page_caps_size(db_session: AsyncSession, monkeypatch: pytest.MonkeyPatch):
    """
    요청한 size가 MAX_PAGE_SIZE를 넘으면 상한으로 줄어드는지 테스트합니다.
    """
    print("\n--- Running test_get_page_caps_size ---")
    monkeypatch.setattr(settings, "MAX_PAGE_SIZE", 2)
    for i in range(3):
        await order_crud.create(db_session, obj_in={"customer_ref": f"PAGE-{i}"})

    page = await order_crud.get_page(db_session, page=0, size=500)

    assert page.size == 2
    assert len(page.content) == 2
    assert page.total_elements == 3
    assert page.total_pages == 2
    print("test_get_page_caps_size passed.")


@pytest.mark.asyncio
async def test_beer_update_with_stale_version(db_session: AsyncSession, test_beer: beer_models.Beer):
    """
    다른 트랜잭션이 버전을 올린 뒤의 수정은 StaleDataError로 거부되는지 테스트합니다.
    """
    print("\n--- Running test_beer_update_with_stale_version ---")
    beer_id = test_beer.id
    await db_session.execute(text("UPDATE beers SET version = version + 1 WHERE id = :id"), {"id": beer_id})

    with pytest.raises(StaleDataError):
        await beer_crud.update_by_id(db_session, id=beer_id, obj_in={"quantity_on_hand": 1})
    print("test_beer_update_with_stale_version passed.")


@pytest.mark.asyncio
async def test_order_update_with_stale_version(db_session: AsyncSession, test_order: order_models.BeerOrder):
    """
    세션에 남은 주문 헤더의 버전이 DB보다 낮으면 commit이 StaleDataError로 거부되는지 테스트합니다.
    """
    print("\n--- Running test_order_update_with_stale_version ---")
    await db_session.execute(
        text("UPDATE beer_orders SET version = version + 1 WHERE id = :id"), {"id": test_order.id}
    )

    test_order.customer_ref = "CUST-STALE"
    with pytest.raises(StaleDataError):
        await db_session.commit()
    print("test_order_update_with_stale_version passed.")


@pytest.mark.asyncio
async def test_order_line_update_with_stale_version(db_session: AsyncSession, test_order: order_models.BeerOrder):
    print("\n--- Running test_order_line_update_with_stale_version ---")
    db_line = test_order.lines[0]
    await db_session.execute(
        text("UPDATE beer_order_lines SET version = version + 1 WHERE id = :id"), {"id": db_line.id}
    )

    db_line.order_quantity = db_line.order_quantity + 10
    with pytest.raises(StaleDataError):
        await db_session.commit()
    print("test_order_line_update_with_stale_version passed.")


@pytest.mark.asyncio
async def test_beer_update_by_id_not_found(db_session: AsyncSession):
    print("\n--- Running test_beer_update_by_id_not_found ---")
    assert await beer_crud.update_by_id(db_session, id=99999, obj_in={"beer_name": "Ghost"}) is None
    assert await beer_crud.count(db_session) == 0
    print("test_beer_update_by_id_not_found passed.")
