# app/domains/employee/models.py

import uuid
from typing import Optional
from sqlmodel import Field, SQLModel


def generate_employee_id() -> str:
    """저장소가 부여하는 새 직원 ID (UUID4 문자열)."""
    return str(uuid.uuid4())


class Employee(SQLModel, table=True):
    """
    employees 테이블 모델을 정의하는 클래스입니다.
    ID는 생성 시 한 번 부여되며 이후 변경되지 않습니다.
    """
    __tablename__ = "employees"

    id: str = Field(default_factory=generate_employee_id, primary_key=True, description="고유 ID")
    first_name: Optional[str] = Field(default=None, description="이름")
    last_name: Optional[str] = Field(default=None, description="성")
    email: Optional[str] = Field(default=None, description="이메일 (형식/중복 검사 없음)")
