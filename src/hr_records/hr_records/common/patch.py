from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, ItemsView, Iterable, Mapping, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Patch:
    """A partial update: attribute name -> new value.

    Only the keys present are written; a value of ``None`` clears the column.
    """

    changes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "changes", MappingProxyType(dict(self.changes)))

    def __bool__(self) -> bool:
        return bool(self.changes)

    def __contains__(self, name: str) -> bool:
        return name in self.changes

    def items(self) -> ItemsView[str, Any]:
        return self.changes.items()

    def get(self, name: str, default: Any = None) -> Any:
        return self.changes.get(name, default)

    def with_value(self, name: str, value: Any) -> "Patch":
        return Patch({**self.changes, name: value})

    def only(self, allowed: Iterable[str]) -> "Patch":
        allowed = set(allowed)
        return Patch({k: v for k, v in self.changes.items() if k in allowed})

    def apply(self, entity: T) -> T:
        """Return a copy of a dataclass entity with the patched attributes."""
        return replace(entity, **self.changes)
