# app/domains/beer/__init__.py

"""
FastAPI 애플리케이션의 'beer' 도메인 패키지입니다.

'beer' 도메인은 맥주 재고 레코드(이름, 스타일, UPC, 보유 수량, 가격)를
생성/조회/수정/삭제하는 역할을 합니다.

주요 서브모듈:
- `models.py`: 'beers' 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic 모델.
- `mappers.py`: 클라이언트가 설정할 수 있는 필드 목록과 엔티티 변환 함수.
- `crud.py`: Beer 서비스 (CRUD 로직).
- `routers.py`: '/beers' API 엔드포인트 정의.
"""

__title__ = "Brewery Beer Domain"
__description__ = "Manages beer inventory records."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "mappers", "crud", "routers"]
