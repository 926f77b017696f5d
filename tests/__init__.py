# tests/__init__.py

"""
Brewery Orders FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

테스트 코드는 `pytest`와 `pytest-asyncio`를 기반으로 작성되며,
httpx AsyncClient로 API 엔드포인트를 호출하거나 서비스 계층을 직접 호출합니다.

주요 구성:
- `test_main.py`: 루트, 헬스 체크, 낙관적 잠금 충돌(409) 테스트.
- `domains/`: 도메인별(beer, order) 테스트 모듈.
- `conftest.py`: 테스트 DB 엔진, 테스트마다 롤백되는 세션, 클라이언트 및 데이터 픽스처.
"""

__title__ = "Brewery Orders API Tests"
__description__ = "Test suite for the Brewery Orders FastAPI application."
__version__ = "0.1.0"
__all__ = []
