"""Structured field paths for drafts and validation errors.

A :class:`FieldPath` is a sequence of field-name and list-index segments,
e.g. ``FieldPath(("contacts", 0, "phone"))``.  It renders to the dotted
form ``contacts.0.phone`` only at the output edge; lookups and error maps
are keyed by the structured value.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from dataclasses import dataclass
from functools import total_ordering
from typing import Any

Segment = str | int


@total_ordering
@dataclass(frozen=True)
class FieldPath:
    """Immutable path into a nested draft or entity payload."""

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        for seg in self.segments:
            if isinstance(seg, bool) or not isinstance(seg, (str, int)):
                msg = f"Invalid field path segment: {seg!r}"
                raise TypeError(msg)

    @classmethod
    def of(cls, *segments: Segment) -> FieldPath:
        return cls(tuple(segments))

    @classmethod
    def parse(cls, dotted: str) -> FieldPath:
        """Parse ``"contacts.0.name"`` into structured segments.

        Purely numeric segments become list indices.

        Examples:
            >>> FieldPath.parse("contacts.0.name").segments
            ('contacts', 0, 'name')
        """
        if not dotted.strip():
            return cls()
        segments: list[Segment] = []
        for raw in dotted.split("."):
            part = raw.strip()
            if not part:
                msg = f"Empty segment in field path {dotted!r}"
                raise ValueError(msg)
            segments.append(int(part) if part.isdigit() else part)
        return cls(tuple(segments))

    @classmethod
    def from_loc(cls, loc: Iterable[Segment]) -> FieldPath:
        """Build a path from a pydantic error ``loc`` tuple.

        Pydantic inserts validator tags such as ``function-after[...]``
        for annotated types; those are not field names and are dropped.
        """
        kept = [seg for seg in loc if isinstance(seg, int) or str(seg).isidentifier()]
        return cls(tuple(kept))

    def child(self, segment: Segment) -> FieldPath:
        return FieldPath((*self.segments, segment))

    @property
    def root(self) -> Segment | None:
        return self.segments[0] if self.segments else None

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return ".".join(str(seg) for seg in self.segments)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FieldPath):
            return NotImplemented
        return _sort_key(self) < _sort_key(other)


def _sort_key(path: FieldPath) -> tuple[tuple[int, str, int], ...]:
    # Indices sort numerically and before names at the same depth.
    return tuple(
        (0, "", seg) if isinstance(seg, int) else (1, seg, 0) for seg in path.segments
    )


def as_path(path: FieldPath | str | Iterable[Segment]) -> FieldPath:
    """Coerce a dotted string or segment iterable into a :class:`FieldPath`."""
    if isinstance(path, FieldPath):
        return path
    if isinstance(path, str):
        return FieldPath.parse(path)
    return FieldPath(tuple(path))


def get_path(data: Any, path: FieldPath | str) -> Any:
    """Read the value at *path* inside nested dicts and lists.

    Raises:
        KeyError: If a field along the path does not exist.
        IndexError: If a list index along the path is out of range.
    """
    current = data
    for seg in as_path(path):
        if isinstance(seg, int):
            if not isinstance(current, list):
                msg = f"Cannot index non-list with {seg} in {path}"
                raise KeyError(msg)
            current = current[seg]
        else:
            if not isinstance(current, MutableMapping) or seg not in current:
                raise KeyError(str(path))
            current = current[seg]
    return current


def set_path(data: MutableMapping[str, Any], path: FieldPath | str, value: Any) -> None:
    """Write *value* at *path*, creating intermediate dicts for missing fields.

    List indices must already exist; drafts grow lists only through
    explicit add/remove operations.
    """
    fp = as_path(path)
    if not fp.segments:
        msg = "Cannot set the empty field path"
        raise ValueError(msg)

    current: Any = data
    for seg, nxt in zip(fp.segments, fp.segments[1:]):
        if isinstance(seg, int):
            if not isinstance(current, list):
                msg = f"Cannot index non-list with {seg} in {fp}"
                raise KeyError(msg)
            current = current[seg]
        else:
            if not isinstance(current, MutableMapping):
                msg = f"Cannot set field {seg!r} inside a non-object in {fp}"
                raise KeyError(msg)
            if current.get(seg) is None:
                current[seg] = [] if isinstance(nxt, int) else {}
            current = current[seg]

    last = fp.segments[-1]
    if isinstance(last, int):
        if not isinstance(current, list):
            msg = f"Cannot index non-list with {last} in {fp}"
            raise KeyError(msg)
        current[last] = value
    else:
        if not isinstance(current, MutableMapping):
            msg = f"Cannot set field {last!r} inside a non-object in {fp}"
            raise KeyError(msg)
        current[last] = value
