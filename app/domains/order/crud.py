# app/domains/order/crud.py

"""
'order' 도메인의 서비스 모듈입니다.

주문(BeerOrder)과 라인(BeerOrderLine)을 하나의 집합으로 다룹니다.
모든 쓰기 작업은 맥주 참조 확인 등 조회/검증을 먼저 끝낸 뒤 세션을 변경하고,
한 번의 commit으로 반영합니다. 검증 실패 시 세션에는 아무것도 추가되지 않습니다.
"""

import logging
import math
from datetime import datetime, UTC
from typing import Any, Dict, List, Optional, Union

from fastapi import HTTPException, status
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.crud_base import CRUDBase
from app.domains.beer import models as beer_models
from app.domains.order import mappers as order_mappers
from app.domains.order import models as order_models
from app.domains.order import schemas as order_schemas

logger = logging.getLogger(__name__)


class BeerOrderCRUD(
    CRUDBase[
        order_models.BeerOrder,
        order_schemas.BeerOrderCreate,
        order_schemas.BeerOrderPatch,
    ]
):
    """BeerOrder 집합에 대한 CRUD 및 라인 관리 작업을 처리합니다."""

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------
    async def get(self, db: AsyncSession, id: Any) -> Optional[order_models.BeerOrder]:
        """
        ID로 주문을 라인과 함께 조회합니다.
        세션에 이미 있는 객체도 DB 값으로 다시 채웁니다 (서버가 갱신한 updated_at 등).
        """
        statement = (
            select(self.model)
            .where(self.model.id == id)
            .options(selectinload(self.model.lines))
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return result.scalars().first()

    async def get_or_404(self, db: AsyncSession, id: int) -> order_models.BeerOrder:
        db_order = await self.get(db, id)
        if db_order is None:
            logger.warning("BeerOrder %d not found", id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"BeerOrder {id} not found")
        return db_order

    async def get_page(self, db: AsyncSession, *, page: int = 0, size: int = 25) -> order_schemas.BeerOrderPage:
        """
        주문 목록을 id 오름차순 페이지로 반환합니다.
        요청한 size가 MAX_PAGE_SIZE를 넘으면 상한으로 줄입니다.
        """
        effective_size = size
        if effective_size > settings.MAX_PAGE_SIZE:
            logger.debug("Page size %d capped to %d", size, settings.MAX_PAGE_SIZE)
            effective_size = settings.MAX_PAGE_SIZE

        total = await self.count(db)
        statement = (
            select(self.model)
            .order_by(self.model.id)
            .offset(page * effective_size)
            .limit(effective_size)
            .options(selectinload(self.model.lines))
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        orders = list(result.scalars().all())

        return order_schemas.BeerOrderPage(
            content=[order_schemas.BeerOrderResponse.model_validate(o) for o in orders],
            page=page,
            size=effective_size,
            total_elements=total,
            total_pages=math.ceil(total / effective_size) if total else 0,
        )

    # -------------------------------------------------------------------------
    # 내부 헬퍼
    # -------------------------------------------------------------------------
    async def _resolve_beer(
        self, db: AsyncSession, beer_id: Optional[int], order_id: Optional[int] = None
    ) -> beer_models.Beer:
        """라인이 참조하는 맥주를 확인합니다. id가 없거나 존재하지 않으면 404를 발생시킵니다."""
        if beer_id is None:
            detail = (
                f"Beer id is required for line in order {order_id}"
                if order_id is not None
                else "Beer id is required for order line"
            )
            logger.warning(detail)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

        db_beer = await db.get(beer_models.Beer, beer_id)
        if db_beer is None:
            logger.warning("Beer %d not found for order line", beer_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Beer {beer_id} not found")
        return db_beer

    async def _build_lines(
        self,
        db: AsyncSession,
        lines_in: List[Union[order_schemas.BeerOrderLineCreate, Dict[str, Any]]],
        order_id: Optional[int] = None,
    ) -> List[order_models.BeerOrderLine]:
        """모든 라인의 맥주를 확인한 뒤 새 라인 엔티티 목록을 만듭니다."""
        lines = []
        for line_in in lines_in:
            beer_id = line_in.get("beer_id") if isinstance(line_in, dict) else line_in.beer_id
            await self._resolve_beer(db, beer_id, order_id)
            lines.append(order_mappers.to_line_entity(line_in))
        return lines

    async def _commit_and_reload(self, db: AsyncSession, db_order: order_models.BeerOrder) -> order_models.BeerOrder:
        db.add(db_order)
        await db.commit()
        return await self.get(db, db_order.id)

    @staticmethod
    def _touch(db_order: order_models.BeerOrder) -> None:
        """라인만 바뀐 경우에도 주문 헤더의 updated_at과 version이 갱신되도록 표시합니다."""
        db_order.updated_at = datetime.now(UTC)

    @staticmethod
    def _find_line(db_order: order_models.BeerOrder, line_id: int) -> Optional[order_models.BeerOrderLine]:
        return next((line for line in db_order.lines if line.id == line_id), None)

    # -------------------------------------------------------------------------
    # 주문 쓰기 작업
    # -------------------------------------------------------------------------
    async def create(
        self, db: AsyncSession, *, obj_in: Union[order_schemas.BeerOrderCreate, Dict[str, Any]]
    ) -> order_models.BeerOrder:
        """주문과 라인을 한 번에 저장합니다. 상태가 없으면 주문/라인 모두 NEW로 설정합니다."""
        lines_in = (obj_in.get("lines") if isinstance(obj_in, dict) else obj_in.lines) or []
        lines = await self._build_lines(db, lines_in)

        db_order = order_mappers.to_order_entity(obj_in)
        db_order.lines.extend(lines)
        db_order = await self._commit_and_reload(db, db_order)
        logger.info("BeerOrder %d created with %d line(s)", db_order.id, len(db_order.lines))
        return db_order

    async def update_by_id(
        self,
        db: AsyncSession,
        *,
        id: int,
        obj_in: Union[order_schemas.BeerOrderCreate, Dict[str, Any]]
    ) -> order_models.BeerOrder:
        """
        주문 전체를 교체합니다.
        customer_ref와 payment_amount는 입력값으로 항상 덮어쓰고, status는 주어진 경우만 바꿉니다.
        기존 라인은 모두 삭제되고 입력 라인으로 새로 만들어집니다 (기존 라인 id와 할당량은 유지되지 않음).
        """
        db_order = await self.get_or_404(db, id)
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        lines = await self._build_lines(db, data.get("lines") or [], order_id=id)

        db_order.customer_ref = data.get("customer_ref")
        db_order.payment_amount = data.get("payment_amount")
        if data.get("status") is not None:
            db_order.status = order_models.OrderStatus(data["status"])
        db_order.lines.clear()
        db_order.lines.extend(lines)
        self._touch(db_order)

        db_order = await self._commit_and_reload(db, db_order)
        logger.info("BeerOrder %d replaced (%d line(s))", id, len(db_order.lines))
        return db_order

    async def patch(
        self,
        db: AsyncSession,
        *,
        id: int,
        obj_in: Union[order_schemas.BeerOrderPatch, Dict[str, Any]]
    ) -> order_models.BeerOrder:
        """null이 아닌 헤더 필드만 반영합니다. 라인은 변경하지 않습니다."""
        db_order = await self.get_or_404(db, id)
        for key, value in order_mappers.order_patch_data(obj_in).items():
            setattr(db_order, key, value)

        db_order = await self._commit_and_reload(db, db_order)
        logger.info("BeerOrder %d patched", id)
        return db_order

    async def remove(self, db: AsyncSession, *, id: int) -> None:
        """주문을 삭제합니다. 라인은 cascade로 함께 삭제됩니다."""
        db_order = await self.get_or_404(db, id)
        await db.delete(db_order)
        await db.commit()
        logger.info("BeerOrder %d deleted", id)

    # -------------------------------------------------------------------------
    # 라인 작업
    # -------------------------------------------------------------------------
    async def add_line(
        self,
        db: AsyncSession,
        *,
        order_id: int,
        line_in: Union[order_schemas.BeerOrderLineCreate, Dict[str, Any]]
    ) -> order_models.BeerOrder:
        """주문에 라인 하나를 추가하고 갱신된 주문을 반환합니다."""
        db_order = await self.get_or_404(db, order_id)
        lines = await self._build_lines(db, [line_in], order_id=order_id)

        db_order.lines.extend(lines)
        self._touch(db_order)
        db_order = await self._commit_and_reload(db, db_order)
        logger.info("Line added to BeerOrder %d (beer %d)", order_id, lines[0].beer_id)
        return db_order

    async def update_line(
        self,
        db: AsyncSession,
        *,
        order_id: int,
        line_id: int,
        line_in: Union[order_schemas.BeerOrderLineCreate, Dict[str, Any]]
    ) -> order_models.BeerOrder:
        """
        라인 하나를 수정합니다.
        맥주 id가 주어지고 현재 값과 다를 때만 맥주를 다시 확인하며,
        나머지 필드는 null이 아닌 값만 반영합니다.
        """
        db_order = await self.get_or_404(db, order_id)
        db_line = self._find_line(db_order, line_id)
        if db_line is None:
            logger.warning("BeerOrderLine %d not found in BeerOrder %d", line_id, order_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"BeerOrderLine {line_id} not found")

        update_data = order_mappers.line_update_data(line_in)
        new_beer_id = update_data.pop("beer_id", None)
        if new_beer_id is not None and new_beer_id != db_line.beer_id:
            await self._resolve_beer(db, new_beer_id, order_id)
            db_line.beer_id = new_beer_id
        for key, value in update_data.items():
            setattr(db_line, key, value)
        self._touch(db_order)

        db_order = await self._commit_and_reload(db, db_order)
        logger.info("BeerOrderLine %d of BeerOrder %d updated", line_id, order_id)
        return db_order

    async def delete_line(self, db: AsyncSession, *, order_id: int, line_id: int) -> order_models.BeerOrder:
        """라인을 제거합니다. 주문에 없는 라인 id는 무시합니다."""
        db_order = await self.get_or_404(db, order_id)
        db_line = self._find_line(db_order, line_id)
        if db_line is None:
            logger.debug("BeerOrderLine %d not in BeerOrder %d, nothing to delete", line_id, order_id)
            return db_order

        db_order.lines.remove(db_line)
        self._touch(db_order)
        db_order = await self._commit_and_reload(db, db_order)
        logger.info("BeerOrderLine %d removed from BeerOrder %d", line_id, order_id)
        return db_order


beer_order = BeerOrderCRUD(order_models.BeerOrder)
