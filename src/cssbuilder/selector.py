# CSS selector builder for cssbuilder
# Assembles selector strings from chained calls, enforcing the CSS order of simple selectors

from __future__ import annotations

import logging
from collections.abc import Iterable

import structlog

from .errors import generate_error_message
from .parts import PartKind, SelectorPart

# Events go through stdlib logging, so nothing is emitted until the application configures it
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
)

# Descendant, child, general sibling, adjacent sibling
COMBINATORS: tuple[str, ...] = (" ", ">", "~", "+")


class SelectorBuildError(ValueError):
    """Raised when a selector cannot be built from the requested parts."""

    code: str
    message: str

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message or generate_error_message(code)
        super().__init__(self.message)

    # Rebuild from constructor arguments rather than args, which only hold the message
    def __reduce__(self) -> tuple[type, tuple[object, ...]]:
        return (type(self), (self.code, self.message))


class DuplicateError(SelectorBuildError):
    """An element, id or pseudo-element was appended to a selector that already has one."""

    kind: PartKind

    def __init__(self, kind: PartKind) -> None:
        self.kind = kind
        super().__init__("duplicate-part", generate_error_message("duplicate-part", kind=kind))

    def __reduce__(self) -> tuple[type, tuple[object, ...]]:
        return (type(self), (self.kind,))


class OrderingError(SelectorBuildError):
    """A part was appended after a part that must come later in CSS order."""

    kind: PartKind
    previous: PartKind

    def __init__(self, kind: PartKind, previous: PartKind) -> None:
        self.kind = kind
        self.previous = previous
        super().__init__("part-out-of-order", generate_error_message("part-out-of-order", kind=kind, previous=previous))

    def __reduce__(self) -> tuple[type, tuple[object, ...]]:
        return (type(self), (self.kind, self.previous))


class InvalidCombinatorError(SelectorBuildError):
    """combine() was given a token that is not a CSS combinator."""

    combinator: str

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        super().__init__("invalid-combinator", generate_error_message("invalid-combinator", combinator=combinator))

    def __reduce__(self) -> tuple[type, tuple[object, ...]]:
        return (type(self), (self.combinator,))


class CompoundSelector:
    """A sequence of simple selectors (e.g., div#main.container).

    Values are immutable. Every append returns a new selector and leaves the
    one it was called on untouched, so any intermediate value can be reused.
    """

    __slots__ = ("_last_rank", "_parts", "_rendered", "_unique_seen")

    _parts: tuple[SelectorPart, ...]
    _rendered: str
    _last_rank: int
    _unique_seen: frozenset[PartKind]

    def __init__(self) -> None:
        self._parts = ()
        self._rendered = ""
        self._last_rank = 0
        self._unique_seen = frozenset()

    @classmethod
    def from_parts(cls, parts: Iterable[SelectorPart]) -> CompoundSelector:
        """Build a selector by appending each part in turn, with the usual checks."""
        selector = cls()
        for part in parts:
            selector = selector._append(part.kind, part.value)
        return selector

    @property
    def parts(self) -> tuple[SelectorPart, ...]:
        return self._parts

    @property
    def rendered(self) -> str:
        return self._rendered

    @property
    def last_rank(self) -> int:
        return self._last_rank

    @property
    def has_type_element(self) -> bool:
        return PartKind.ELEMENT in self._unique_seen

    @property
    def has_id(self) -> bool:
        return PartKind.ID in self._unique_seen

    @property
    def has_pseudo_element(self) -> bool:
        return PartKind.PSEUDO_ELEMENT in self._unique_seen

    def element(self, name: str) -> CompoundSelector:
        return self._append(PartKind.ELEMENT, name)

    def id(self, name: str) -> CompoundSelector:
        return self._append(PartKind.ID, name)

    def class_(self, name: str) -> CompoundSelector:
        return self._append(PartKind.CLASS, name)

    def attribute(self, expr: str) -> CompoundSelector:
        """Append an attribute selector. expr is embedded verbatim, e.g. 'href$=".png"'."""
        return self._append(PartKind.ATTRIBUTE, expr)

    def pseudo_class(self, name: str) -> CompoundSelector:
        return self._append(PartKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> CompoundSelector:
        return self._append(PartKind.PSEUDO_ELEMENT, name)

    def stringify(self) -> str:
        return self._rendered

    def _append(self, kind: PartKind, value: str) -> CompoundSelector:
        if kind.rank < self._last_rank:
            previous = PartKind(self._last_rank)
            logger.debug(
                "selector_part_rejected",
                code="part-out-of-order",
                kind=kind.label,
                previous=previous.label,
                selector=self._rendered,
            )
            raise OrderingError(kind, previous)

        if kind.unique and kind in self._unique_seen:
            logger.debug(
                "selector_part_rejected",
                code="duplicate-part",
                kind=kind.label,
                selector=self._rendered,
            )
            raise DuplicateError(kind)

        part = SelectorPart(kind, str(value))
        selector = CompoundSelector.__new__(CompoundSelector)
        selector._parts = (*self._parts, part)
        selector._rendered = self._rendered + part.render()
        selector._last_rank = kind.rank
        selector._unique_seen = self._unique_seen | {kind} if kind.unique else self._unique_seen
        return selector

    def __str__(self) -> str:
        return self._rendered

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundSelector):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)

    def __repr__(self) -> str:
        return f"CompoundSelector({self._rendered!r})"


class ComplexSelector:
    """Two selectors joined by a combinator (e.g., div#main + table#data).

    A combined selector can only be rendered or combined again; simple parts
    cannot be appended to it.
    """

    __slots__ = ("_combinator", "_left", "_rendered", "_right")

    _left: Selector
    _combinator: str
    _right: Selector
    _rendered: str

    def __init__(self, left: Selector, combinator: str, right: Selector) -> None:
        self._left = left
        self._combinator = combinator
        self._right = right
        # The combinator is always padded with one space on each side
        self._rendered = f"{left.stringify()} {combinator} {right.stringify()}"

    @property
    def left(self) -> Selector:
        return self._left

    @property
    def combinator(self) -> str:
        return self._combinator

    @property
    def right(self) -> Selector:
        return self._right

    @property
    def rendered(self) -> str:
        return self._rendered

    def stringify(self) -> str:
        return self._rendered

    def __str__(self) -> str:
        return self._rendered

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexSelector):
            return NotImplemented
        return (self._left, self._combinator, self._right) == (other._left, other._combinator, other._right)

    def __hash__(self) -> int:
        return hash((self._left, self._combinator, self._right))

    def __repr__(self) -> str:
        return f"ComplexSelector({self._rendered!r})"


# Type alias for anything combine() accepts
Selector = CompoundSelector | ComplexSelector


class BuilderOpts:
    __slots__ = ("validate_combinator",)

    validate_combinator: bool

    def __init__(self, validate_combinator: bool = True) -> None:
        self.validate_combinator = bool(validate_combinator)


# The empty selector every chain starts from. Never modified.
_ROOT: CompoundSelector = CompoundSelector()


class SelectorBuilder:
    """Entry point for building selectors.

    Example:
        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'
    """

    __slots__ = ("opts",)

    opts: BuilderOpts

    def __init__(self, opts: BuilderOpts | None = None) -> None:
        self.opts = opts or BuilderOpts()

    def element(self, name: str) -> CompoundSelector:
        return _ROOT.element(name)

    def id(self, name: str) -> CompoundSelector:
        return _ROOT.id(name)

    def class_(self, name: str) -> CompoundSelector:
        return _ROOT.class_(name)

    def attribute(self, expr: str) -> CompoundSelector:
        return _ROOT.attribute(expr)

    def pseudo_class(self, name: str) -> CompoundSelector:
        return _ROOT.pseudo_class(name)

    def pseudo_element(self, name: str) -> CompoundSelector:
        return _ROOT.pseudo_element(name)

    def combine(self, left: Selector, combinator: str, right: Selector) -> ComplexSelector:
        """
        Join two selectors with a combinator.

        Args:
            left: Selector on the left of the combinator
            combinator: One of " " (descendant), ">" (child), "~" (general sibling) or "+" (adjacent sibling)
            right: Selector on the right of the combinator

        Returns:
            A new combined selector. Neither input is modified.
        """
        if self.opts.validate_combinator and combinator not in COMBINATORS:
            logger.debug("combine_rejected", code="invalid-combinator", combinator=combinator)
            raise InvalidCombinatorError(combinator)
        return ComplexSelector(left, combinator, right)

    def stringify(self, selector: Selector) -> str:
        return selector.stringify()


# Global builder instance
builder: SelectorBuilder = SelectorBuilder()


def combine(left: Selector, combinator: str, right: Selector) -> ComplexSelector:
    """Join two selectors with a combinator using the default builder."""
    return builder.combine(left, combinator, right)


def stringify(selector: Selector) -> str:
    """Return the CSS text of a selector."""
    return selector.stringify()
