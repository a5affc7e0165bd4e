"""Search data models — registry results and filter predicates."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

# Predicate names understood by the result filter
IS_AUTOMATED = "is-automated"
IS_OFFICIAL = "is-official"
HAS_STARS = "has-stars"

RECOGNIZED_PREDICATES = (IS_AUTOMATED, IS_OFFICIAL, HAS_STARS)

# Read-only mapping of predicate name to its literal string value
FilterPredicates = Mapping[str, str]


@dataclass(frozen=True)
class SearchResult:
    """A single catalog entry returned by a registry search."""

    name: str
    description: str = ""
    star_count: int = 0
    is_official: bool = False
    is_automated: bool = False
    is_trusted: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> SearchResult:
        """Build a result from one item of the registry's ``results`` array.

        Missing or null fields take their defaults. Raises ``TypeError`` or
        ``ValueError`` when an item or field has the wrong JSON type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"result must be an object, got {type(data).__name__}")
        return cls(
            name=_field(data, "name", str, ""),
            description=_field(data, "description", str, ""),
            star_count=_star_count(data),
            is_official=_field(data, "is_official", bool, False),
            is_automated=_field(data, "is_automated", bool, False),
            is_trusted=_field(data, "is_trusted", bool, False),
        )

    def to_api(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "star_count": self.star_count,
            "is_official": self.is_official,
            "is_automated": self.is_automated,
            "is_trusted": self.is_trusted,
        }


def make_predicates(values: Mapping[str, str]) -> FilterPredicates:
    """Freeze *values* into predicates, seeding the recognized keys with ``""``."""
    seeded = {key: "" for key in RECOGNIZED_PREDICATES}
    seeded.update(values)
    return MappingProxyType(seeded)


def _field(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise TypeError(f"{key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _star_count(data: dict[str, Any]) -> int:
    # bool is an int subclass; JSON true is not a star count
    value = data.get("star_count")
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'star_count' must be int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"'star_count' must not be negative, got {value}")
    return value
