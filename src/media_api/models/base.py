"""Shared response model base."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class RecordModel(BaseModel):
    """Response model that can be built straight from a service record."""

    model_config = ConfigDict(from_attributes=True)


class ItemList(BaseModel, Generic[T]):
    """A list of records with its length."""

    items: list[T]
    count: int


class SuccessResponse(BaseModel):
    success: bool = True
    id: str | None = None
