# app/domains/employee/routers.py

"""
'employee' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

각 엔드포인트는 요청을 CRUD 호출 하나로 변환하고, 결과를 HTTP 응답으로 매핑합니다.
의존성 주입을 통해 요청마다 데이터베이스 세션을 받습니다.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.domains.employee import crud as employee_crud
from app.domains.employee import schemas as employee_schemas

# 라우터 인스턴스 생성
router = APIRouter(
    prefix="/employees",
    tags=["Employee Management (직원 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[employee_schemas.EmployeeRead], summary="모든 직원 목록 조회")
async def read_employees(
    skip: int = Query(0, ge=0, description="건너뛸 레코드 수"),
    limit: Optional[int] = Query(None, ge=1, description="가져올 최대 레코드 수 (생략 시 전체)"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    모든 직원 목록을 조회합니다. 순서는 보장되지 않습니다.
    """
    return await employee_crud.employee.get_multi(db, skip=skip, limit=limit)


@router.get("/{employee_id}", response_model=employee_schemas.EmployeeRead, summary="특정 직원 조회")
async def read_employee(
    employee_id: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    특정 ID의 직원 정보를 조회합니다.
    - 존재하지 않으면 404를 반환합니다.
    """
    db_employee = await employee_crud.employee.get(db, id=employee_id)
    if db_employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return db_employee


@router.post("", response_model=employee_schemas.EmployeeRead, status_code=status.HTTP_201_CREATED, summary="새 직원 생성")
async def create_employee(
    employee_in: employee_schemas.EmployeeCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새로운 직원을 생성합니다.
    - `id`가 없으면 저장소가 생성하여 응답에 포함합니다.
    """
    return await employee_crud.employee.create(db, obj_in=employee_in)


@router.put("/{employee_id}", response_model=employee_schemas.EmployeeRead, summary="직원 정보 저장 (upsert)")
async def update_employee(
    employee_id: str,
    employee_in: employee_schemas.EmployeeUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    특정 ID의 직원 정보를 본문 내용으로 교체합니다.
    - 본문의 `id`는 무시되고 경로의 `employee_id`가 사용됩니다.
    - 해당 ID의 직원이 없으면 새로 생성합니다.
    """
    return await employee_crud.employee.replace(db, id=employee_id, obj_in=employee_in)


@router.delete("/{employee_id}", status_code=status.HTTP_200_OK, summary="직원 삭제")
async def delete_employee(
    employee_id: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    특정 ID의 직원을 삭제합니다. 없는 ID를 삭제해도 오류가 아닙니다.
    """
    await employee_crud.employee.remove(db, id=employee_id)
    return Response(status_code=status.HTTP_200_OK)
