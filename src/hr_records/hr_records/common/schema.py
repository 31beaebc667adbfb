from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Mapping, Tuple

from ..core.exceptions import ValidationError
from .datetime_utils import parse_timestamp
from .patch import Patch

TEXT = "text"
INTEGER = "integer"
TIMESTAMP = "timestamp"

# Server-assigned; ignored when present in input.
SERVER_FIELDS = frozenset({"id", "createdAt"})

_MISSING = object()


class _Issue(Exception):
    pass


def _coerce_text(value: Any) -> str:
    if not isinstance(value, str):
        raise _Issue("expected text")
    return value


def _coerce_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise _Issue("expected integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise _Issue("expected integer")


def _coerce_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        try:
            return parse_timestamp(value)
        except ValueError:
            raise _Issue("invalid date")
    raise _Issue("expected date")


_COERCERS: Dict[str, Callable[[Any], Any]] = {
    TEXT: _coerce_text,
    INTEGER: _coerce_integer,
    TIMESTAMP: _coerce_timestamp,
}


@dataclass(frozen=True)
class Field:
    """One column of an entity as seen on the wire."""

    name: str
    wire: str
    kind: str = TEXT
    required: bool = True
    nullable: bool = False
    default: Any = None

    def coerce(self, value: Any) -> Any:
        if value is None:
            if self.nullable:
                return None
            raise _Issue("required")
        return _COERCERS[self.kind](value)


class Schema:
    """Declarative validator for one entity's insert/update payloads."""

    def __init__(self, entity: str, *fields: Field):
        self.entity = entity
        self._fields: Tuple[Field, ...] = fields

    def parse(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate a creation payload. Returns attribute name -> typed value."""
        out: Dict[str, Any] = {}
        issues: List[str] = []
        for f in self._fields:
            value = raw.get(f.wire, _MISSING)
            if value is _MISSING:
                if f.required:
                    issues.append(f"{f.wire}: required")
                else:
                    out[f.name] = f.default
                continue
            try:
                out[f.name] = f.coerce(value)
            except _Issue as e:
                issues.append(f"{f.wire}: {e}")
        self._raise_if(issues)
        return out

    def parse_patch(self, raw: Mapping[str, Any]) -> Patch:
        """Validate a partial update. Unknown and server-assigned keys are ignored."""
        changes: Dict[str, Any] = {}
        issues: List[str] = []
        for f in self._fields:
            if f.wire in SERVER_FIELDS or f.wire not in raw:
                continue
            try:
                changes[f.name] = f.coerce(raw[f.wire])
            except _Issue as e:
                issues.append(f"{f.wire}: {e}")
        self._raise_if(issues)
        return Patch(changes)

    def _raise_if(self, issues: List[str]) -> None:
        if issues:
            raise ValidationError("; ".join(issues))
