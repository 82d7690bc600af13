"""List Filters - explicit, immutable filter structs built once at the HTTP boundary.

Invariants:
    - Every field is optional; an empty filter matches every record
    - Boolean flags are None (no filter) or a concrete bool
    - List filters are tuples of non-empty, stripped strings (any-of semantics)
    - List membership is structural: "web" never matches a stored "webgl"

Design Decisions:
    - Frozen dataclasses over loose dicts: repositories only accept known fields
    - Query-string parsing lives here (pure), routes only forward raw values
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def parse_flag(raw: str | None) -> bool | None:
    """Query flag: absent means "no filter"; only the literal "true" is true."""
    if raw is None:
        return None
    return raw == "true"


def parse_multi(raw: Sequence[str] | str | None) -> tuple[str, ...]:
    """Accept repeated params and comma-separated values as one ordered set."""
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [raw]
    values: list[str] = []
    for chunk in raw:
        for part in chunk.split(","):
            part = part.strip()
            if part and part not in values:
                values.append(part)
    return tuple(values)


def contains_any(stored: Iterable[str] | None, wanted: Sequence[str]) -> bool:
    """True when any wanted value is an element of the stored list."""
    if not wanted:
        return True
    return bool(set(stored or ()) & set(wanted))


@dataclass(frozen=True)
class ProjectFilters:
    featured: bool | None = None
    categories: tuple[str, ...] = ()

    @classmethod
    def from_query(
        cls, featured: str | None, categories: Sequence[str] | None,
    ) -> "ProjectFilters":
        return cls(
            featured=parse_flag(featured),
            categories=parse_multi(categories),
        )


@dataclass(frozen=True)
class BlogPostFilters:
    published: bool | None = None
    featured: bool | None = None
    categories: tuple[str, ...] = ()

    @classmethod
    def from_query(
        cls,
        published: str | None,
        featured: str | None,
        categories: Sequence[str] | None,
    ) -> "BlogPostFilters":
        return cls(
            published=parse_flag(published),
            featured=parse_flag(featured),
            categories=parse_multi(categories),
        )


@dataclass(frozen=True)
class ServiceFilters:
    """Services only ever narrow to active ones; active=False is never a filter."""
    active_only: bool = False

    @classmethod
    def from_query(cls, active: str | None) -> "ServiceFilters":
        return cls(active_only=parse_flag(active) is True)
