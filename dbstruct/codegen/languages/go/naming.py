"""
Go-specific naming checks.

Generated names are never rewritten (the output must stay predictable),
but names Go would reject are reported as warnings.
"""

from typing import List

# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}


def is_valid_go_identifier(name: str) -> bool:
    """True if ``name`` can be used as a Go identifier."""
    return bool(name) and name.isidentifier() and name not in GO_RESERVED_WORDS


def is_exported(name: str) -> bool:
    """Go exports identifiers that start with an uppercase letter."""
    return bool(name) and name[0].isupper()


def validate_go_package_name(name: str) -> List[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    if name[0].isupper():
        errors.append("Package names should be lowercase")

    if "-" in name:
        errors.append("Package names should not contain hyphens")

    if name in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors
