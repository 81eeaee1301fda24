# tests/domains/__init__.py

"""
도메인별 API 엔드포인트 테스트 패키지입니다.

- `test_employee_n.py`: 'employee' 도메인 (/api/employees) 테스트.
"""

__title__ = "Employee API Domain Tests"
__all__ = []
