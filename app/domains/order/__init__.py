# app/domains/order/__init__.py

"""
FastAPI 애플리케이션의 'order' 도메인 패키지입니다.

'order' 도메인은 맥주 주문(BeerOrder)과 그 주문이 소유하는 주문 라인(BeerOrderLine)을
하나의 집합(aggregate)으로 관리합니다. 라인은 항상 부모 주문과 함께 저장/삭제되며,
각 라인은 기존 맥주(Beer)를 id로 참조해야 합니다.

주요 서브모듈:
- `models.py`: 'beer_orders', 'beer_order_lines' 테이블 및 상태 Enum 정의.
- `schemas.py`: 요청/응답 및 페이지 응답 Pydantic 모델.
- `mappers.py`: 클라이언트 입력을 엔티티로 변환하는 함수.
- `crud.py`: 주문 서비스 (생성, 조회, 전체/부분 수정, 삭제, 라인 관리).
- `routers.py`: '/orders' API 엔드포인트 정의.
"""

__title__ = "Brewery Order Domain"
__description__ = "Manages beer orders and their order lines."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "mappers", "crud", "routers"]
