import abc
from typing import Generic, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):
    """Two-way conversion between a pydantic domain model and its ORM entity."""

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        """Build the ORM entity to persist for a domain model."""

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        """Build the domain model for a loaded ORM entity."""
