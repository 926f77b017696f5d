# app/domains/beer/crud.py

"""
'beer' 도메인의 CRUD(Create, Read, Update, Delete) 작업을 위한 서비스 모듈입니다.
SQLModel과 SQLAlchemy를 사용하여 데이터베이스와 상호작용합니다.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.domains.beer import mappers as beer_mappers
from app.domains.beer import models as beer_models
from app.domains.beer import schemas as beer_schemas

logger = logging.getLogger(__name__)


class BeerCRUD(
    CRUDBase[
        beer_models.Beer,
        beer_schemas.BeerCreate,
        beer_schemas.BeerUpdate,
    ]
):
    """Beer 모델에 특화된 CRUD 작업을 처리합니다."""

    async def get_all(self, db: AsyncSession) -> List[beer_models.Beer]:
        """모든 맥주를 id 오름차순으로 조회합니다."""
        return await self.get_multi(db)

    async def create(
        self, db: AsyncSession, *, obj_in: Union[beer_schemas.BeerCreate, Dict[str, Any]]
    ) -> beer_models.Beer:
        """새 맥주를 저장합니다. 서버 관리 필드는 입력에서 가져오지 않습니다."""
        beer = beer_mappers.to_beer_entity(obj_in)
        db.add(beer)
        await db.commit()
        await db.refresh(beer)
        logger.info("Beer %d created (%s)", beer.id, beer.beer_name)
        return beer

    async def update_by_id(
        self, db: AsyncSession, *, id: int, obj_in: Union[beer_schemas.BeerUpdate, Dict[str, Any]]
    ) -> Optional[beer_models.Beer]:
        """
        null이 아닌 클라이언트 필드만 기존 레코드에 병합합니다.
        id가 없으면 아무것도 만들지 않고 None을 반환합니다.
        """
        db_beer = await self.get(db, id)
        if db_beer is None:
            logger.warning("Beer %d not found for update", id)
            return None
        updated = await self.update(db, db_obj=db_beer, obj_in=beer_mappers.beer_update_data(obj_in))
        logger.info("Beer %d updated (version %s)", updated.id, updated.version)
        return updated

    async def remove(self, db: AsyncSession, *, id: int) -> bool:
        """
        ID로 맥주를 삭제합니다. 레코드가 있었으면 True, 없었으면 False를 반환합니다.
        주문 라인이 참조 중이면 삭제를 거부합니다.
        """
        db_beer = await self.get(db, id)
        if db_beer is None:
            return False
        try:
            await db.delete(db_beer)
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.error(f"IntegrityError during beer deletion (ID: {id}): {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete beer due to existing order lines."
            )
        logger.info("Beer %d deleted", id)
        return True


beer = BeerCRUD(beer_models.Beer)
