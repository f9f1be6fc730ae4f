"""
Go code generator module.

Generates Go structs with struct tags from database catalog metadata.
"""

from .generator import GoGenerator
from .types import GO_TYPE_MAP, GoType, GoTypeMapper, map_type

__all__ = [
    "GoGenerator",
    "GoType",
    "GoTypeMapper",
    "GO_TYPE_MAP",
    "map_type",
]
