# tests/core/test_crud_base.py

"""
CRUDBase의 upsert / 조회 / 삭제 동작을 API를 거치지 않고 직접 검증합니다.
"""

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from app.domains.employee import crud as employee_crud
from app.domains.employee import models as employee_models
from app.domains.employee import schemas as employee_schemas


@pytest.mark.asyncio
async def test_save_without_id_generates_one(db_session: AsyncSession):
    obj_in = employee_schemas.EmployeeCreate(first_name="Ann", last_name="Lee", email="ann@x.com")
    employee = await employee_crud.employee.save(db_session, obj_in=obj_in)

    assert employee.id
    assert employee.first_name == "Ann"


@pytest.mark.asyncio
async def test_save_explicit_id_wins_over_payload_id(db_session: AsyncSession):
    obj_in = employee_schemas.EmployeeUpdate(id="B", first_name="X")
    employee = await employee_crud.employee.save(db_session, obj_in=obj_in, id="A")

    assert employee.id == "A"
    assert await employee_crud.employee.get(db_session, id="B") is None


@pytest.mark.asyncio
async def test_save_existing_id_overwrites_all_fields(db_session: AsyncSession):
    await employee_crud.employee.create(
        db_session,
        obj_in=employee_schemas.EmployeeCreate(id="emp-1", first_name="Ann", last_name="Lee", email="ann@x.com"),
    )
    updated = await employee_crud.employee.replace(
        db_session, id="emp-1", obj_in=employee_schemas.EmployeeUpdate(first_name="Anna")
    )

    assert updated.id == "emp-1"
    assert updated.first_name == "Anna"
    assert updated.last_name is None
    assert updated.email is None
    assert len(await employee_crud.employee.get_multi(db_session)) == 1


@pytest.mark.asyncio
async def test_save_retries_as_update_after_concurrent_insert(db_session: AsyncSession, monkeypatch):
    """
    삽입 중 기본 키 충돌(동시 삽입)이 나면 갱신으로 재시도하는지 테스트합니다.
    """
    existing = employee_models.Employee(id="race", first_name="First")
    original_get = db_session.get
    calls = {"get": 0}

    async def racing_get(entity, ident, **kwargs):
        #  첫 조회는 "아직 없음"을 흉내내고, 그 사이 다른 요청이 같은 ID를 삽입합니다.
        calls["get"] += 1
        if calls["get"] == 1:
            db_session.add(existing)
            await db_session.commit()
            db_session.expunge(existing)
            return None
        return await original_get(entity, ident, **kwargs)

    monkeypatch.setattr(db_session, "get", racing_get)

    saved = await employee_crud.employee.save(
        db_session, obj_in=employee_schemas.EmployeeUpdate(first_name="Second"), id="race"
    )

    assert saved.id == "race"
    assert saved.first_name == "Second"
    assert calls["get"] == 2


@pytest.mark.asyncio
async def test_get_returns_none_for_missing_id(db_session: AsyncSession):
    assert await employee_crud.employee.get(db_session, id="missing") is None


@pytest.mark.asyncio
async def test_delete_missing_id_is_noop(db_session: AsyncSession):
    assert await employee_crud.employee.remove(db_session, id="missing") is None


@pytest.mark.asyncio
async def test_delete_returns_removed_record(db_session: AsyncSession):
    created = await employee_crud.employee.create(
        db_session, obj_in=employee_schemas.EmployeeCreate(id="gone", first_name="Ann")
    )
    removed = await employee_crud.employee.remove(db_session, id=created.id)

    assert removed.id == "gone"
    assert await employee_crud.employee.get(db_session, id="gone") is None
