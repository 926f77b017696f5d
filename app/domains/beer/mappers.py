# app/domains/beer/mappers.py

"""
Beer 엔티티와 요청/응답 스키마 사이의 변환 함수 모듈입니다.

클라이언트가 값을 지정할 수 있는 필드는 `BEER_CLIENT_FIELDS`뿐이며,
id, version, created_at, updated_at은 서버가 관리합니다.
"""

from typing import Any, Dict, Union

from app.domains.beer import models as beer_models
from app.domains.beer import schemas as beer_schemas

BEER_CLIENT_FIELDS = ("beer_name", "beer_style", "upc", "quantity_on_hand", "price")


def _as_dict(beer_in: Union[beer_schemas.BeerCreate, beer_schemas.BeerUpdate, Dict[str, Any]]) -> Dict[str, Any]:
    return beer_in if isinstance(beer_in, dict) else beer_in.model_dump()


def to_beer_entity(beer_in: Union[beer_schemas.BeerCreate, Dict[str, Any]]) -> beer_models.Beer:
    """요청 데이터로 새 Beer 엔티티를 만듭니다. 허용 목록 밖의 키는 버립니다."""
    data = _as_dict(beer_in)
    return beer_models.Beer(**{key: data[key] for key in BEER_CLIENT_FIELDS if key in data})


def beer_update_data(beer_in: Union[beer_schemas.BeerUpdate, Dict[str, Any]]) -> Dict[str, Any]:
    """기존 엔티티에 병합할 값만 추립니다. 허용 목록에 있고 null이 아닌 값만 남깁니다."""
    data = _as_dict(beer_in)
    return {
        key: data[key]
        for key in BEER_CLIENT_FIELDS
        if data.get(key) is not None
    }
