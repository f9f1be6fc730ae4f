"""
Base generator interface for all code generation targets.

Defines the contract a language generator implements and the result
object returned by a generation run.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .config import GeneratorConfig
from .schema import Column, GeneratedUnit
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())
        self.register_templates(self._template_engine)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    def register_templates(self, engine: TemplateEngine):
        """Hook for subclasses to add their built-in templates."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate_single_table(self, table: str, columns: List[Column]) -> GeneratedUnit:
        """
        Generate the type definition for one table.

        Args:
            table: Table name as stored in the catalog
            columns: Columns in catalog order

        Returns:
            GeneratedUnit holding the type name and code
        """
        pass

    @abstractmethod
    def render_file(self, units: Iterable[GeneratedUnit]) -> str:
        """Combine several units into one source file under one package header."""
        pass

    def emit(self, table: str, columns: List[Column]) -> Tuple[str, str]:
        """Return ``(type_name, body)`` for one table."""
        unit = self.generate_single_table(table, columns)
        return unit.name, unit.code

    def get_import_statements(self, imports: Iterable[str]) -> List[str]:
        """Format the given import paths as source lines (can be empty)."""
        return []

    def format_code(self, code: str) -> str:
        """
        Apply basic cleanup to generated code.

        Strips trailing whitespace and collapses runs of more than two
        blank lines; full formatting is left to the language's own tool.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        units: Optional[Dict[str, GeneratedUnit]] = None,
        warnings: Optional[List[str]] = None,
    ):
        """
        Initialize generation result.

        Args:
            units: Generated units keyed by type name
            warnings: Any warnings from generation
        """
        self.units: Dict[str, GeneratedUnit] = units if units is not None else {}
        self.warnings: List[str] = warnings or []
        self.written: List[Path] = []
        self.failed: Dict[Path, str] = {}

    @property
    def success(self) -> bool:
        """True when every file was written."""
        return not self.failed

    def __repr__(self) -> str:
        return (
            f"GenerationResult(units={len(self.units)}, written={len(self.written)}, "
            f"failed={len(self.failed)}, warnings={len(self.warnings)})"
        )
