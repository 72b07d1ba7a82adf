import logging
import uuid
from typing import Any, Generic, TypeVar

from goodschain.repositories.base import Repository

ModelT = TypeVar("ModelT")

# Audit actor used when the caller does not identify itself
SYSTEM_ACTOR = "system"


class ResourceService(Generic[ModelT]):
    """
    Business layer over a resource repository.

    The only rules applied here are defaults:
    - a UUID4 string id when none is given on create
    - "system" as created_by/updated_by when the caller supplies none

    Repository errors propagate unchanged.
    """

    def __init__(self, repository: Repository[ModelT], logger: logging.Logger | None = None):
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    def create(self, values: dict[str, Any]) -> ModelT:
        values = dict(values)
        if not values.get("id"):
            values["id"] = str(uuid.uuid4())
        if not values.get("created_by"):
            values["created_by"] = SYSTEM_ACTOR
        if not values.get("updated_by"):
            values["updated_by"] = SYSTEM_ACTOR
        row = self.repository.create(values)
        self.logger.debug("Created %s %s", type(row).__name__, values["id"])
        return row

    def get(self, resource_id: str) -> ModelT:
        return self.repository.get(resource_id)

    def get_all(self) -> list[ModelT]:
        return self.repository.get_all()

    def update(self, resource_id: str, values: dict[str, Any]) -> None:
        values = dict(values)
        if not values.get("updated_by"):
            values["updated_by"] = SYSTEM_ACTOR
        self.repository.update(resource_id, values)

    def delete(self, resource_id: str) -> None:
        self.repository.delete(resource_id)
