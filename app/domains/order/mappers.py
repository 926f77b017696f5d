# app/domains/order/mappers.py

"""
주문 요청 스키마를 엔티티로 변환하는 함수 모듈입니다.

클라이언트가 지정할 수 있는 헤더 필드는 `ORDER_HEADER_FIELDS`,
라인 필드는 `LINE_CLIENT_FIELDS`뿐입니다. 상태가 비어 있으면 NEW로 채웁니다.
"""

from typing import Any, Dict, Union

from sqlmodel import SQLModel

from app.domains.order import models as order_models
from app.domains.order import schemas as order_schemas

ORDER_HEADER_FIELDS = ("customer_ref", "payment_amount", "status")
LINE_CLIENT_FIELDS = ("beer_id", "order_quantity", "quantity_allocated", "status")


def _as_dict(obj_in: Union[SQLModel, Dict[str, Any]]) -> Dict[str, Any]:
    return obj_in if isinstance(obj_in, dict) else obj_in.model_dump()


def to_line_entity(
    line_in: Union[order_schemas.BeerOrderLineCreate, Dict[str, Any]]
) -> order_models.BeerOrderLine:
    """라인 입력으로 새 BeerOrderLine을 만듭니다. 맥주 존재 여부는 호출 측에서 확인합니다."""
    data = _as_dict(line_in)
    status = data.get("status")
    allocated = data.get("quantity_allocated")
    return order_models.BeerOrderLine(
        beer_id=data["beer_id"],
        order_quantity=data["order_quantity"],
        quantity_allocated=allocated if allocated is not None else 0,
        status=order_models.LineStatus(status) if status is not None else order_models.LineStatus.NEW,
    )


def to_order_entity(
    order_in: Union[order_schemas.BeerOrderCreate, Dict[str, Any]]
) -> order_models.BeerOrder:
    """주문 헤더만으로 새 BeerOrder를 만듭니다. 라인은 서비스에서 맥주를 확인한 뒤 붙입니다."""
    data = _as_dict(order_in)
    status = data.get("status")
    return order_models.BeerOrder(
        customer_ref=data.get("customer_ref"),
        payment_amount=data.get("payment_amount"),
        status=order_models.OrderStatus(status) if status is not None else order_models.OrderStatus.NEW,
    )


def order_patch_data(
    order_in: Union[order_schemas.BeerOrderPatch, Dict[str, Any]]
) -> Dict[str, Any]:
    """부분 수정에 반영할 헤더 값만 추립니다. null 값과 허용 목록 밖의 키는 버립니다."""
    data = _as_dict(order_in)
    return {
        key: data[key]
        for key in ORDER_HEADER_FIELDS
        if data.get(key) is not None
    }


def line_update_data(
    line_in: Union[order_schemas.BeerOrderLineCreate, Dict[str, Any]]
) -> Dict[str, Any]:
    """기존 라인에 병합할 값만 추립니다. null 값은 기존 값을 유지하도록 제외합니다."""
    data = _as_dict(line_in)
    return {
        key: data[key]
        for key in LINE_CLIENT_FIELDS
        if data.get(key) is not None
    }
