# app/domains/employee/__init__.py

"""
FastAPI 애플리케이션의 'employee' 도메인 패키지입니다.

'employee' 도메인은 직원(Employee) 리소스 하나에 대한 CRUD를 담당하는
순수한 변환 계층입니다. 유일한 비즈니스 규칙은 수정(PUT) 시
경로의 ID가 본문의 ID보다 우선한다는 것입니다.

주요 서브모듈:
- `models.py`: employees 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic 모델 (camelCase JSON).
- `crud.py`: employees 테이블에 대한 upsert/조회/삭제 로직.
- `routers.py`: /api/employees 엔드포인트 정의.
"""

__title__ = "Employee Domain"
__description__ = "CRUD resource for employees (id, firstName, lastName, email)."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "routers", "crud"]
