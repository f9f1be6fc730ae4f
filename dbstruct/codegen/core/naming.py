"""
Naming utilities for code generation.

Converts catalog identifiers between the casing conventions used for
struct names, field names, tag values and file names.
"""

from enum import Enum


class NamingCase(Enum):
    """Identifier casing modes."""

    UNCHANGED = "unchanged"  # user_name -> user_name
    SNAKE_TO_PASCAL = "pascal"  # user_name -> UserName
    SNAKE_TO_CAMEL = "camel"  # user_name -> userName
    TO_SNAKE = "snake"  # UserName -> user_name

    @classmethod
    def from_string(cls, value: "str | NamingCase") -> "NamingCase":
        """
        Resolve a casing mode from its value or member name.

        Args:
            value: "pascal", "SNAKE_TO_PASCAL" or a NamingCase member

        Returns:
            Matching NamingCase

        Raises:
            ValueError: If the value names no casing mode
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip()
        for case in cls:
            if key.lower() == case.value or key.upper() == case.name:
                return case

        valid = ", ".join(case.value for case in cls)
        raise ValueError(f"Unknown naming case '{value}' (expected one of: {valid})")


def format_name(name: str, case: NamingCase) -> str:
    """
    Format an identifier with the given casing mode.

    Args:
        name: Identifier as it appears in the catalog
        case: Target casing mode

    Returns:
        Formatted identifier
    """
    if case == NamingCase.SNAKE_TO_PASCAL:
        return _snake_to_pascal(name)
    elif case == NamingCase.SNAKE_TO_CAMEL:
        return _snake_to_camel(name)
    elif case == NamingCase.TO_SNAKE:
        return _to_snake(name)
    return name


def _snake_to_pascal(name: str) -> str:
    """Upper-case the first letter of every underscore segment."""
    # Consecutive or edge underscores produce empty segments
    return "".join(part[0].upper() + part[1:] for part in name.split("_") if part)


def _snake_to_camel(name: str) -> str:
    """Like pascal, but the first segment starts lower-case."""
    parts = [part for part in name.split("_") if part]
    if not parts:
        return ""

    head = parts[0][0].lower() + parts[0][1:]
    return head + "".join(part[0].upper() + part[1:] for part in parts[1:])


def _to_snake(name: str) -> str:
    """Insert an underscore before each uppercase letter and lower it."""
    chars = []
    for index, char in enumerate(name):
        if char.isupper():
            if index != 0:
                chars.append("_")
            chars.append(char.lower())
        else:
            chars.append(char)
    return "".join(chars)
