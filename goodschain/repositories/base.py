from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from goodschain.errors import already_exists, not_found

ModelT = TypeVar("ModelT")


@dataclass(frozen=True)
class ResourceDescriptor:
    """Describes one table-backed resource: display name, ORM model and writable fields."""

    name: str
    model: type
    fields: tuple[str, ...]


class Repository(ABC, Generic[ModelT]):
    """Data access contract shared by every resource."""

    @abstractmethod
    def create(self, values: dict[str, Any]) -> ModelT:
        pass

    @abstractmethod
    def get(self, resource_id: str) -> ModelT:
        """Return the row or raise NotFoundError."""

    @abstractmethod
    def get_all(self) -> list[ModelT]:
        pass

    @abstractmethod
    def update(self, resource_id: str, values: dict[str, Any]) -> None:
        """Update the row or raise NotFoundError when nothing matched."""

    @abstractmethod
    def delete(self, resource_id: str) -> None:
        """Delete the row or raise NotFoundError when nothing matched."""


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SQLRepository(Repository[ModelT]):
    """Single-table repository driven by a ResourceDescriptor. Pure data access."""

    resource: ResourceDescriptor

    def __init__(self, db: Session):
        self.db = db

    @property
    def model(self):
        return self.resource.model

    def create(self, values: dict[str, Any]) -> ModelT:
        if self.db.get(self.model, values["id"]) is not None:
            raise already_exists(self.resource.name, values["id"])

        now = _now()
        row = self.model(
            id=values["id"],
            created_at=now,
            created_by=values["created_by"],
            updated_at=now,
            updated_by=values["updated_by"],
            **{field: values.get(field) for field in self.resource.fields},
        )
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise already_exists(self.resource.name, values["id"]) from exc
        self.db.refresh(row)
        return row

    def get(self, resource_id: str) -> ModelT:
        row = self.db.get(self.model, resource_id)
        if row is None:
            raise not_found(self.resource.name, resource_id)
        return row

    def get_all(self) -> list[ModelT]:
        return list(self._select().scalars().all())

    def update(self, resource_id: str, values: dict[str, Any]) -> None:
        changes = {field: values.get(field) for field in self.resource.fields}
        stmt = (
            update(self.model)
            .where(self.model.id == resource_id)
            .values(**changes, updated_by=values["updated_by"], updated_at=_now())
        )
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            self.db.rollback()
            raise not_found(self.resource.name, resource_id)
        self.db.commit()

    def delete(self, resource_id: str) -> None:
        result = self.db.execute(delete(self.model).where(self.model.id == resource_id))
        if result.rowcount == 0:
            self.db.rollback()
            raise not_found(self.resource.name, resource_id)
        self.db.commit()

    def _select(self, *criteria):
        stmt = select(self.model).where(*criteria).order_by(self.model.created_at.desc())
        return self.db.execute(stmt)
