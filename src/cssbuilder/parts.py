from __future__ import annotations

import enum


class PartKind(enum.IntEnum):
    """Simple selector categories. The value is the rank in CSS order."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def unique(self) -> bool:
        return self in _UNIQUE_KINDS

    @property
    def label(self) -> str:
        return _LABELS[self]

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

_LABELS: dict[PartKind, str] = {
    PartKind.ELEMENT: "element",
    PartKind.ID: "id",
    PartKind.CLASS: "class",
    PartKind.ATTRIBUTE: "attribute",
    PartKind.PSEUDO_CLASS: "pseudo-class",
    PartKind.PSEUDO_ELEMENT: "pseudo-element",
}

_UNIQUE_KINDS: frozenset[PartKind] = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})


class SelectorPart:
    """One simple selector: a kind and the raw text embedded for it."""

    __slots__ = ("kind", "value")

    kind: PartKind
    value: str

    def __init__(self, kind: PartKind, value: str) -> None:
        self.kind = kind
        self.value = value

    @property
    def rank(self) -> int:
        return self.kind.rank

    def render(self) -> str:
        return self.kind.render(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorPart):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"SelectorPart({self.kind.name}, {self.value!r})"
