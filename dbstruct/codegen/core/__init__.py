"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult
from .schema import Column, GeneratedUnit
from .naming import NamingCase, format_name
from .config import GeneratorConfig, Tag, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    # Catalog data structures
    "Column",
    "GeneratedUnit",
    # Naming utilities - language-agnostic
    "NamingCase",
    "format_name",
    # Configuration system
    "GeneratorConfig",
    "Tag",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
