"""Centralized error message definitions for selector building errors.

Every failure raised while assembling a selector has a kebab-case code. This
module turns a code plus its context into the human-readable message carried
by the exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parts import PartKind

ORDER_HINT = "element, id, class, attribute, pseudo-class, pseudo-element"


def generate_error_message(
    code: str,
    kind: PartKind | None = None,
    previous: PartKind | None = None,
    combinator: str | None = None,
) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        kind: The selector part kind being appended, if any
        previous: The kind of the part appended last, if any
        combinator: The combinator token passed to combine, if any

    Returns:
        Human-readable error message string
    """
    kind_label = kind.label if kind is not None else "selector part"
    previous_label = previous.label if previous is not None else "selector part"

    messages = {
        "duplicate-part": f"{kind_label} selector may occur at most once inside a compound selector",
        "part-out-of-order": (
            f"selector parts out of CSS order: {kind_label} must not follow {previous_label}"
            f" (expected order: {ORDER_HINT})"
        ),
        "invalid-combinator": f"Unknown combinator {combinator!r} (expected one of ' ', '>', '~', '+')",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)
