# app/domains/employee/schemas.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class EmployeeBase(BaseModel):
    """
    직원 정보의 기본 속성을 정의하는 Pydantic Base 스키마입니다.
    JSON에서는 camelCase(firstName, lastName)를 사용하고, 속성 이름으로도 입력을 받습니다.
    """
    model_config = ConfigDict(
        populate_by_name=True,   # first_name 으로도 입력 허용
        from_attributes=True,    # ORM 모드 활성화
    )

    first_name: Optional[str] = Field(None, alias="firstName", description="이름")
    last_name: Optional[str] = Field(None, alias="lastName", description="성")
    email: Optional[str] = Field(None, description="이메일")


# --- API Schemas ---
class EmployeeCreate(EmployeeBase):
    # 비어 있으면 저장소가 ID를 생성합니다.
    id: Optional[str] = None


class EmployeeUpdate(EmployeeBase):
    """
    직원 정보를 수정(전체 교체)하기 위한 스키마입니다.
    본문의 `id`는 무시되고 경로의 ID가 사용됩니다.
    """
    id: Optional[str] = None


class EmployeeRead(EmployeeBase):
    id: str
