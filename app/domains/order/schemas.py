# app/domains/order/schemas.py

"""
'order' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from pydantic import ConfigDict, Field
from sqlmodel import SQLModel

from app.domains.order.models import LineStatus, OrderStatus


# =============================================================================
# 1. beer_order_lines 스키마
# =============================================================================
class BeerOrderLineCreate(SQLModel):
    """주문 라인 생성 및 라인 수정(PUT)에 사용되는 스키마입니다."""
    beer_id: int = Field(..., description="참조할 맥주 ID")
    order_quantity: int = Field(..., ge=1, description="주문 수량")
    quantity_allocated: Optional[int] = Field(None, ge=0, description="할당된 수량")
    status: Optional[LineStatus] = Field(None, description="라인 상태 (생략 시 NEW)")


class BeerOrderLineResponse(SQLModel):
    id: int
    version: Optional[int] = None
    beer_id: int
    order_quantity: int
    quantity_allocated: int
    status: LineStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# 2. beer_orders 스키마
# =============================================================================
class BeerOrderCreate(SQLModel):
    """주문 생성(POST) 및 전체 수정(PUT)에 사용되는 스키마입니다."""
    customer_ref: Optional[str] = Field(None, max_length=255, description="고객 참조 번호")
    payment_amount: Optional[Decimal] = Field(None, ge=0, max_digits=19, decimal_places=2, description="결제 금액")
    status: Optional[OrderStatus] = Field(None, description="주문 상태 (생략 시 NEW)")
    lines: Optional[List[BeerOrderLineCreate]] = Field(default_factory=list, description="주문 라인 목록 (null이면 빈 목록)")


class BeerOrderPatch(SQLModel):
    """
    주문 헤더의 부분 수정(PATCH) 스키마입니다.
    라인은 이 엔드포인트에서 수정할 수 없으며, 본문의 `lines` 키는 무시됩니다.
    """
    customer_ref: Optional[str] = Field(None, max_length=255, description="고객 참조 번호")
    payment_amount: Optional[Decimal] = Field(None, ge=0, max_digits=19, decimal_places=2, description="결제 금액")
    status: Optional[OrderStatus] = Field(None, description="주문 상태")


class BeerOrderResponse(SQLModel):
    id: int
    version: Optional[int] = None
    customer_ref: Optional[str] = None
    payment_amount: Optional[Decimal] = None
    status: OrderStatus
    lines: List[BeerOrderLineResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BeerOrderPage(SQLModel):
    """주문 목록 페이지 응답입니다. size는 상한이 적용된 실제 페이지 크기입니다."""
    content: List[BeerOrderResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int
