# spritesheets/core/resources.py
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T")


class ResourceManager:
    """Shared, process-wide state. Holds at most one value per type."""

    def __init__(self) -> None:
        self._resources: Dict[Type[Any], Any] = {}

    def add(self, resource: Any) -> None:
        self._resources[type(resource)] = resource

    def get(self, resource_type: Type[T]) -> T:
        if resource_type not in self._resources:
            raise KeyError(f"Resource not found: {resource_type.__name__}")
        return self._resources[resource_type]

    def try_get(self, resource_type: Type[T]) -> T | None:
        return self._resources.get(resource_type)

    def __contains__(self, resource_type: Type[Any]) -> bool:
        return resource_type in self._resources
