from typing import Callable

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from goodschain.schemas.error import ErrorResponse, SuccessResponse
from goodschain.services.base import ResourceService

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def build_crud_router(
    *,
    prefix: str,
    tags: list[str],
    resource_name: str,
    schema: type[BaseModel],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    get_service: Callable[..., ResourceService],
) -> APIRouter:
    """
    Build the five standard routes for one resource.

    POST returns the created resource (201), GET returns one or all,
    PUT and DELETE return {"message": "<Resource> updated/deleted successfully"}.
    Errors are raised and rendered by the global exception handlers.
    """
    router = APIRouter(prefix=prefix, tags=tags, responses=ERROR_RESPONSES)

    @router.post("", response_model=schema, status_code=status.HTTP_201_CREATED)
    def create(data: create_schema, service: ResourceService = Depends(get_service)):
        row = service.create(data.model_dump())
        return schema.model_validate(row)

    @router.get("", response_model=list[schema])
    def get_all(service: ResourceService = Depends(get_service)):
        return [schema.model_validate(row) for row in service.get_all()]

    @router.get("/{resource_id}", response_model=schema)
    def get_by_id(resource_id: str, service: ResourceService = Depends(get_service)):
        return schema.model_validate(service.get(resource_id))

    @router.put("/{resource_id}", response_model=SuccessResponse)
    def update(
        resource_id: str,
        data: update_schema,
        service: ResourceService = Depends(get_service),
    ):
        service.update(resource_id, data.model_dump())
        return SuccessResponse(message=f"{resource_name} updated successfully")

    @router.delete("/{resource_id}", response_model=SuccessResponse)
    def delete(resource_id: str, service: ResourceService = Depends(get_service)):
        service.delete(resource_id)
        return SuccessResponse(message=f"{resource_name} deleted successfully")

    return router
