# tests/__init__.py

"""
Employee API 테스트 스위트 패키지입니다.

- `domains/`: 도메인별 API 엔드포인트 테스트.
- `core/`: 설정, 데이터베이스, CRUD 기반 클래스, 예외 처리기 테스트.
- `conftest.py`: 메모리 SQLite 기반 세션과 테스트 클라이언트 픽스처.
"""

__title__ = "Employee API Tests"
__all__ = []
