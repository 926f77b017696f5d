# app/domains/order/models.py

"""
'order' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

BeerOrder는 BeerOrderLine 컬렉션을 독점적으로 소유합니다.
컬렉션에서 제거된 라인은 flush 시점에 삭제됩니다 (delete-orphan).
"""

from typing import List, Optional
from datetime import datetime, UTC
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, SQLModel, Relationship, Column
from sqlalchemy import Integer, Numeric, String
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


_order_version_col = Column("version", Integer, nullable=False)
_line_version_col = Column("version", Integer, nullable=False)


class OrderStatus(str, Enum):
    """주문 상태. 상태 전이 규칙은 강제하지 않습니다."""
    NEW = "NEW"
    VALIDATION_PENDING = "VALIDATION_PENDING"
    VALIDATED = "VALIDATED"
    ALLOCATION_PENDING = "ALLOCATION_PENDING"
    ALLOCATED = "ALLOCATED"
    PICKED_UP = "PICKED_UP"
    CANCELLED = "CANCELLED"


class LineStatus(str, Enum):
    """주문 라인 상태"""
    NEW = "NEW"
    ALLOCATED = "ALLOCATED"
    PENDING_INVENTORY = "PENDING_INVENTORY"
    PICKED_UP = "PICKED_UP"
    CANCELLED = "CANCELLED"


# =============================================================================
# 1. beer_orders 테이블 모델
# =============================================================================
class BeerOrder(SQLModel, table=True):
    __tablename__ = "beer_orders"
    __mapper_args__ = {"version_id_col": _order_version_col}

    id: Optional[int] = Field(default=None, primary_key=True)
    version: Optional[int] = Field(default=None, sa_column=_order_version_col)
    customer_ref: Optional[str] = Field(default=None, max_length=255, description="고객 참조 번호")
    payment_amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(19, 2)),
        description="결제 금액"
    )
    status: OrderStatus = Field(
        default=OrderStatus.NEW,
        sa_column=Column(String(30), nullable=False),
        description="주문 상태"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )

    # 주문이 라인의 생명주기를 소유합니다 (일대다 관계)
    lines: List["BeerOrderLine"] = Relationship(
        back_populates="beer_order",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "lazy": "selectin",
            "order_by": "BeerOrderLine.id",
        }
    )


# =============================================================================
# 2. beer_order_lines 테이블 모델
# =============================================================================
class BeerOrderLine(SQLModel, table=True):
    __tablename__ = "beer_order_lines"
    __mapper_args__ = {"version_id_col": _line_version_col}

    id: Optional[int] = Field(default=None, primary_key=True)
    version: Optional[int] = Field(default=None, sa_column=_line_version_col)
    beer_order_id: Optional[int] = Field(
        default=None, foreign_key="beer_orders.id", nullable=False, index=True, description="부모 주문 ID"
    )
    beer_id: int = Field(foreign_key="beers.id", index=True, description="참조하는 맥주 ID")
    order_quantity: int = Field(description="주문 수량")
    quantity_allocated: int = Field(default=0, description="할당된 수량")
    status: LineStatus = Field(
        default=LineStatus.NEW,
        sa_column=Column(String(30), nullable=False),
        description="라인 상태"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )

    beer_order: Optional[BeerOrder] = Relationship(back_populates="lines")
