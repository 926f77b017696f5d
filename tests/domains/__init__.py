# tests/domains/__init__.py

"""
도메인별 테스트 스위트 패키지입니다.

- `test_beer_n.py`: '/beers' API 통합 테스트.
- `test_order_n.py`: '/orders' 및 라인 하위 리소스 API 통합 테스트.
- `test_order_crud_n.py`: 주문/맥주 서비스 계층 직접 호출 테스트.
- `test_mappers_n.py`: 엔티티 변환 함수 단위 테스트.
"""

__title__ = "Brewery Orders Domain Tests"
__description__ = "Categorized tests for each business domain."
__version__ = "0.1.0"
__all__ = []
