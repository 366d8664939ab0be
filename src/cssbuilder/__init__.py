from .parts import PartKind, SelectorPart
from .selector import (
    COMBINATORS,
    BuilderOpts,
    ComplexSelector,
    CompoundSelector,
    DuplicateError,
    InvalidCombinatorError,
    OrderingError,
    Selector,
    SelectorBuildError,
    SelectorBuilder,
    builder,
    combine,
    stringify,
)

__all__ = [
    "COMBINATORS",
    "BuilderOpts",
    "ComplexSelector",
    "CompoundSelector",
    "DuplicateError",
    "InvalidCombinatorError",
    "OrderingError",
    "PartKind",
    "Selector",
    "SelectorBuildError",
    "SelectorBuilder",
    "SelectorPart",
    "builder",
    "combine",
    "stringify",
]
