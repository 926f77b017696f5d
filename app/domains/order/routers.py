# app/domains/order/routers.py

from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app import API_PREFIX
from app.core import dependencies as deps
from app.domains.order import crud as order_crud, schemas as order_schemas

router = APIRouter(
    tags=["Order Management (주문 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. orders 엔드포인트
# =============================================================================
@router.post(
    "",
    response_model=order_schemas.BeerOrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    order_create: order_schemas.BeerOrderCreate,
    response: Response,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """새로운 주문을 라인과 함께 생성합니다."""
    db_order = await order_crud.beer_order.create(db=db, obj_in=order_create)
    response.headers["Location"] = f"{API_PREFIX}/orders/{db_order.id}"
    return db_order


@router.get("", response_model=order_schemas.BeerOrderPage)
async def read_orders(
    page_params: deps.PageParams = Depends(deps.get_page_params),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """주문 목록을 페이지 단위로 조회합니다. size는 서버 최대값으로 제한됩니다."""
    return await order_crud.beer_order.get_page(db, page=page_params.page, size=page_params.size)


@router.get("/{order_id}", response_model=order_schemas.BeerOrderResponse)
async def read_order(order_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await order_crud.beer_order.get_or_404(db, order_id)


@router.put("/{order_id}", response_model=order_schemas.BeerOrderResponse)
async def replace_order(
    order_id: int,
    order_in: order_schemas.BeerOrderCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """주문 전체를 교체합니다. 기존 라인은 입력 라인으로 다시 만들어집니다."""
    return await order_crud.beer_order.update_by_id(db, id=order_id, obj_in=order_in)


@router.patch("/{order_id}", response_model=order_schemas.BeerOrderResponse)
async def patch_order(
    order_id: int,
    order_in: order_schemas.BeerOrderPatch,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """주문 헤더 필드를 부분 수정합니다. 라인은 변경되지 않습니다."""
    return await order_crud.beer_order.patch(db, id=order_id, obj_in=order_in)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    await order_crud.beer_order.remove(db, id=order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. orders/{order_id}/lines 엔드포인트
# =============================================================================
@router.post(
    "/{order_id}/lines",
    response_model=order_schemas.BeerOrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_order_line(
    order_id: int,
    line_in: order_schemas.BeerOrderLineCreate,
    response: Response,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """주문에 라인을 추가합니다. Location 헤더는 부모 주문을 가리킵니다."""
    db_order = await order_crud.beer_order.add_line(db, order_id=order_id, line_in=line_in)
    response.headers["Location"] = f"{API_PREFIX}/orders/{order_id}"
    return db_order


@router.put("/{order_id}/lines/{line_id}", response_model=order_schemas.BeerOrderResponse)
async def update_order_line(
    order_id: int,
    line_id: int,
    line_in: order_schemas.BeerOrderLineCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await order_crud.beer_order.update_line(db, order_id=order_id, line_id=line_id, line_in=line_in)


@router.delete("/{order_id}/lines/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order_line(order_id: int, line_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """라인을 삭제합니다. 주문에 없는 라인 id면 아무것도 하지 않습니다."""
    await order_crud.beer_order.delete_line(db, order_id=order_id, line_id=line_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
