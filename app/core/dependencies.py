# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 목록 조회용 페이지 파라미터 (get_page_params).
"""

from typing import AsyncGenerator, NamedTuple

from fastapi import Query
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.database import get_session as get_main_app_session


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    app.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


class PageParams(NamedTuple):
    page: int
    size: int


def get_page_params(
    page: int = Query(0, ge=0, description="0부터 시작하는 페이지 번호"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, description="페이지 크기 (서버 최대값으로 제한됨)"),
) -> PageParams:
    """쿼리 문자열의 page/size를 읽습니다. 상한 적용은 서비스 계층이 담당합니다."""
    return PageParams(page=page, size=size)
