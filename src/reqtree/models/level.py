"""Outline level keys.

An item's level is a dotted-decimal string such as ``"2.3.1"``. Parsed into
a tuple of integers it orders items in outline order, and with trailing
zeros stripped its length gives the item's nesting depth. A trailing ``0``
marks a heading (``"2.0"`` heads the items ``"2.1"``, ``"2.2"``, ...).

Parsing is lenient: segments that are not integers are dropped instead of
failing the whole level.
"""

import re
from dataclasses import dataclass
from enum import Enum

LevelKey = tuple[int, ...]

# Digits with an optional plus sign; anything else in a segment is dropped
_SEGMENT_RE = re.compile(r"\+?[0-9]+")


def parse_level(level: str) -> LevelKey:
    """Parse a dotted level string into a level key.

    Args:
        level: Dotted level such as ``"1.2.0"``

    Returns:
        Tuple of the integer segments, e.g. ``(1, 2, 0)``. Malformed segments
        are skipped, so ``"1.a.2"`` gives ``(1, 2)`` and ``"x"`` gives ``()``.
    """
    return tuple(
        int(segment) for segment in level.split(".") if _SEGMENT_RE.fullmatch(segment)
    )


def strip_trailing_zeros(key: LevelKey) -> LevelKey:
    """Drop trailing zero segments: ``(2, 0, 0)`` becomes ``(2,)``."""
    end = len(key)
    while end and key[end - 1] == 0:
        end -= 1
    return key[:end]


def level_depth(level: str | LevelKey) -> int:
    """Return the 0-based nesting depth of a level.

    ``"1"`` and ``"2.0"`` are depth 0, ``"2.10"`` is depth 1. A level with no
    usable segments is depth 0.
    """
    key = parse_level(level) if isinstance(level, str) else level
    return max(len(strip_trailing_zeros(key)), 1) - 1


class RelationKind(str, Enum):
    """Kind of depth relation between two levels."""

    SAME = "same"
    OUT = "out"
    IN = "in"


@dataclass(frozen=True)
class LevelRelation:
    """Depth relation of level ``b`` seen from level ``a``.

    Attributes:
        kind: SAME when both are at the same depth, OUT when ``b`` is deeper
            than ``a``, IN when ``b`` is shallower than ``a``
        distance: Number of levels between the two depths (0 for SAME)
    """

    kind: RelationKind
    distance: int = 0

    @classmethod
    def same(cls) -> "LevelRelation":
        return cls(RelationKind.SAME)

    @classmethod
    def out_level(cls, distance: int) -> "LevelRelation":
        return cls(RelationKind.OUT, distance)

    @classmethod
    def in_level(cls, distance: int) -> "LevelRelation":
        return cls(RelationKind.IN, distance)

    def inverse(self) -> "LevelRelation":
        """Return the same relation seen from the other level."""
        if self.kind is RelationKind.OUT:
            return LevelRelation.in_level(self.distance)
        if self.kind is RelationKind.IN:
            return LevelRelation.out_level(self.distance)
        return self

    def __str__(self) -> str:
        if self.kind is RelationKind.SAME:
            return "SameLevel"
        name = "OutLevel" if self.kind is RelationKind.OUT else "InLevel"
        return f"{name}({self.distance})"


def level_relation(a: str | LevelKey, b: str | LevelKey) -> LevelRelation:
    """Classify the depth of level ``b`` relative to level ``a``.

    Only depth is compared, not ancestry: ``"1.1"`` and ``"2.3"`` are at the
    same level even though they sit under different headings.

    Args:
        a: Reference level
        b: Level to classify

    Returns:
        ``SameLevel`` for equal depth, ``OutLevel(n)`` when ``b`` is ``n``
        levels deeper than ``a``, ``InLevel(n)`` when ``b`` is ``n`` levels
        shallower.
    """
    key_a = parse_level(a) if isinstance(a, str) else a
    key_b = parse_level(b) if isinstance(b, str) else b
    len_a = len(strip_trailing_zeros(key_a))
    len_b = len(strip_trailing_zeros(key_b))

    if len_a < len_b:
        return LevelRelation.out_level(len_b - len_a)
    if len_a > len_b:
        return LevelRelation.in_level(len_a - len_b)
    return LevelRelation.same()
