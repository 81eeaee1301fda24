# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.

저장 연산은 upsert 의미를 가집니다: 키가 없으면 생성하고, 있으면 덮어씁니다.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar, Union, Any

from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    모델의 기본 키 필드 이름은 `id`로 가정합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        레코드가 없으면 None을 반환하므로, 호출자는 두 경우를 모두 처리해야 합니다.
        """
        return await db.get(self.model, id)

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. limit이 None이면 전체를 반환합니다.
        반환 순서는 저장소가 정합니다.
        """
        query = select(self.model).offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def save(
        self,
        db: AsyncSession,
        *,
        obj_in: Union[CreateSchemaType, UpdateSchemaType],
        id: Optional[Any] = None,
    ) -> ModelType:
        """
        레코드를 생성하거나 갱신합니다 (upsert).

        - 인자로 받은 `id`가 `obj_in.id`보다 우선합니다.
        - 둘 다 비어 있으면 모델의 기본값 팩토리가 새 ID를 생성합니다.
        - 동시 삽입으로 기본 키 충돌이 나면 한 번 갱신으로 재시도합니다 (last-write-wins).
        """
        data = obj_in.model_dump(exclude={"id"})
        record_id = id or getattr(obj_in, "id", None)

        if not record_id:
            db_obj = self.model(**data)
            return await self._commit(db, db_obj)

        db_obj = await db.get(self.model, record_id)
        if db_obj is not None:
            return await self._overwrite(db, db_obj, data)

        try:
            return await self._commit(db, self.model(id=record_id, **data))
        except IntegrityError:
            await db.rollback()
            logger.warning("%s %s was inserted concurrently, retrying as update", self.model.__name__, record_id)
            db_obj = await db.get(self.model, record_id)
            if db_obj is None:
                raise
            return await self._overwrite(db, db_obj, data)

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 삭제합니다.
        없는 ID는 아무 일도 하지 않고 None을 반환합니다 (멱등).
        """
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
            logger.info("Deleted %s %s", self.model.__name__, id)
        return db_obj

    async def _overwrite(self, db: AsyncSession, db_obj: ModelType, data: dict) -> ModelType:
        # PUT 의미: 요청에 없는 필드도 None으로 덮어씁니다.
        for key, value in data.items():
            setattr(db_obj, key, value)
        return await self._commit(db, db_obj)

    async def _commit(self, db: AsyncSession, db_obj: ModelType) -> ModelType:
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        logger.info("Saved %s %s", self.model.__name__, db_obj.id)
        return db_obj
