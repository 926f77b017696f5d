# app/domains/beer/schemas.py

"""
'beer' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

서버가 관리하는 필드(id, version, created_at, updated_at)는 요청 스키마에 없으므로
요청 본문에 포함되어도 무시됩니다.
"""

from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import ConfigDict, Field, field_validator
from sqlmodel import SQLModel


def reject_blank(value: Optional[str]) -> Optional[str]:
    """공백만으로 이루어진 문자열을 거부합니다. None은 그대로 통과시킵니다."""
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


# =============================================================================
# 1. beers 테이블 스키마
# =============================================================================
class BeerBase(SQLModel):
    beer_name: str = Field(..., max_length=100, description="맥주 이름")
    beer_style: str = Field(..., max_length=50, description="맥주 스타일 (ALE, PALE ALE, IPA 등)")
    upc: str = Field(..., max_length=50, description="Universal Product Code")
    quantity_on_hand: int = Field(..., description="보유 수량")
    price: Decimal = Field(..., max_digits=19, decimal_places=2, description="단가")

    @field_validator("beer_name", "beer_style", "upc")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return reject_blank(value)


class BeerCreate(BeerBase):
    pass


class BeerUpdate(SQLModel):
    """
    맥주 정보를 수정하기 위한 스키마입니다.
    모든 필드는 선택 사항이며, null이거나 생략된 필드는 기존 값을 유지합니다.
    """
    beer_name: Optional[str] = Field(None, max_length=100, description="맥주 이름")
    beer_style: Optional[str] = Field(None, max_length=50, description="맥주 스타일")
    upc: Optional[str] = Field(None, max_length=50, description="Universal Product Code")
    quantity_on_hand: Optional[int] = Field(None, description="보유 수량")
    price: Optional[Decimal] = Field(None, max_digits=19, decimal_places=2, description="단가")

    @field_validator("beer_name", "beer_style", "upc")
    @classmethod
    def check_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return reject_blank(value)


class BeerResponse(BeerBase):
    id: int = Field(..., description="맥주 고유 ID")
    version: Optional[int] = Field(None, description="낙관적 잠금 버전")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    model_config = ConfigDict(from_attributes=True)
