"""Parsing helpers for settings values and CLI selection arguments."""

from __future__ import annotations


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Strip `value` to text, mapping `None` and blank strings to `None`."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Read a settings toggle from YAML or the CLI.

    Real booleans pass through; `true/false`, `yes/no`, `on/off` and `1/0` are
    accepted in any case. Anything else yields `None`.
    """

    if isinstance(value, bool):
        return value

    token = normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a toggle value that must be set, e.g. `copy_to_clipboard`.

    Raises:
        ValueError: Naming `field_name` when the token is not a known boolean.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is None:
        raise ValueError(
            f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return parsed


def parse_line_range(expression: str) -> tuple[int, int]:
    """Parse a `--lines` value such as `3` or `2-5` into `(first, last)`.

    Both ends are 1-based and inclusive.

    Raises:
        ValueError: If the syntax is malformed or the range is inverted.
    """

    token = expression.strip()
    if not token:
        raise ValueError("Line range must not be empty. Use syntax like `3` or `2-5`.")

    if "-" not in token:
        index = _parse_positive_line(token)
        return index, index

    start_text, end_text = (part.strip() for part in token.split("-", 1))
    if not start_text or not end_text:
        raise ValueError(f"Malformed line range `{token}`. Use syntax like `2-5`.")
    first = _parse_positive_line(start_text)
    last = _parse_positive_line(end_text)
    if first > last:
        raise ValueError(
            f"Malformed line range `{token}`: start must be less than or equal to end."
        )
    return first, last


def _parse_positive_line(token: str) -> int:
    if not token.isdigit():
        raise ValueError(f"Invalid line number `{token}`. Use positive integers.")
    value = int(token)
    if value <= 0:
        raise ValueError(f"Line number `{value}` must be positive and 1-based.")
    return value
