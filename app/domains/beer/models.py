# app/domains/beer/models.py

"""
'beer' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime, UTC
from decimal import Decimal
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Integer, Numeric
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# 낙관적 잠금용 버전 컬럼. mapper의 version_id_col로 등록되어 UPDATE마다 비교 후 증가합니다.
_beer_version_col = Column("version", Integer, nullable=False)


# =============================================================================
# 1. beers 테이블 모델
# =============================================================================
class BeerBase(SQLModel):
    beer_name: str = Field(max_length=100, description="맥주 이름")
    beer_style: str = Field(max_length=50, description="맥주 스타일 (ALE, PALE ALE, IPA 등)")
    upc: str = Field(max_length=50, index=True, description="Universal Product Code")
    quantity_on_hand: int = Field(default=0, description="보유 수량")
    price: Decimal = Field(sa_column=Column(Numeric(19, 2), nullable=False), description="단가")


class Beer(BeerBase, table=True):
    __tablename__ = "beers"
    __mapper_args__ = {"version_id_col": _beer_version_col}

    id: Optional[int] = Field(default=None, primary_key=True)
    version: Optional[int] = Field(default=None, sa_column=_beer_version_col)
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
