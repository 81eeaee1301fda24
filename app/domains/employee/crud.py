# app/domains/employee/crud.py

"""
'employee' 도메인과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from . import models, schemas


class CRUDEmployee(CRUDBase[models.Employee, schemas.EmployeeCreate, schemas.EmployeeUpdate]):
    def __init__(self):
        super().__init__(model=models.Employee)

    async def create(self, db: AsyncSession, *, obj_in: schemas.EmployeeCreate) -> models.Employee:
        """본문의 ID가 있으면 그대로 사용하고, 없으면 새로 생성하여 저장합니다."""
        return await self.save(db, obj_in=obj_in)

    async def replace(
        self, db: AsyncSession, *, id: str, obj_in: schemas.EmployeeUpdate
    ) -> models.Employee:
        """
        경로의 ID로 직원을 저장합니다. 본문의 ID는 항상 경로 ID로 덮어씁니다.
        해당 ID가 없으면 새로 생성합니다.
        """
        return await self.save(db, obj_in=obj_in, id=id)

    async def remove(self, db: AsyncSession, *, id: str) -> Optional[models.Employee]:
        return await self.delete(db, id=id)


employee = CRUDEmployee()
