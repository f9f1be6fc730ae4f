"""File system operations for generated code."""

import shutil
import subprocess
from pathlib import Path
from typing import Dict, Iterable, Optional

from ..logging_config import get_logger
from .core.config import GeneratorConfig
from .core.generator import CodeGenerator, GenerationResult, GeneratorError
from .core.naming import format_name
from .core.schema import GeneratedUnit

logger = get_logger(__name__)

DEFAULT_OUTPUT_DIR = "model"
DEFAULT_SINGLE_FILE_NAME = "models"


class WriteError(GeneratorError):
    """Raised when generated code cannot be written to disk."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class OutputManager:
    """Writes generated units to disk.

    In single-file mode every unit goes into one file under a single
    package clause; otherwise each unit gets its own file in the output
    directory, named after its type with the configured file-name casing.
    """

    def __init__(
        self,
        generator: CodeGenerator,
        config: GeneratorConfig,
        cwd: Optional[Path] = None,
    ) -> None:
        """Initialize the output manager.

        Args:
            generator: Generator used to assemble combined files
            config: Output settings
            cwd: Base for the default output path (process cwd if omitted)
        """
        self.generator = generator
        self.config = config
        self.output_path = self.resolve_output_path(cwd)

    def resolve_output_path(self, cwd: Optional[Path] = None) -> Path:
        """Return the configured path, or ``<cwd>/model[/models.go]``."""
        if self.config.output_path:
            return Path(self.config.output_path)

        base = Path(cwd) if cwd else Path.cwd()
        path = base / DEFAULT_OUTPUT_DIR
        if self.config.single_file:
            path = path / f"{DEFAULT_SINGLE_FILE_NAME}{self.generator.file_extension}"
        return path

    def file_path_for(self, unit: GeneratedUnit) -> Path:
        """Path of the per-table file for ``unit``."""
        filename = format_name(unit.name, self.config.file_name_fmt)
        return self.output_path / f"{filename}{self.generator.file_extension}"

    def write(self, units: Dict[str, GeneratedUnit], result: GenerationResult) -> GenerationResult:
        """Write all units, recording written and failed paths on ``result``.

        Raises:
            WriteError: If the output directory cannot be created, or the
                combined file cannot be written in single-file mode.
        """
        if self.config.single_file:
            self._write_single_file(units.values(), result)
        else:
            self._write_per_table(units.values(), result)
        return result

    def _write_single_file(self, units: Iterable[GeneratedUnit], result: GenerationResult) -> None:
        path = self.output_path
        self._create_directory(path.parent)

        content = self.generator.render_file(units)
        try:
            self._write_file(path, content)
        except OSError as e:
            logger.error("Write failed for %s: %s", path, e)
            raise WriteError(path, e) from e

        result.written.append(path)
        self._format_file(path)

    def _write_per_table(self, units: Iterable[GeneratedUnit], result: GenerationResult) -> None:
        self._create_directory(self.output_path)

        written_by: Dict[Path, str] = {}
        for unit in units:
            path = self.file_path_for(unit)

            if path in written_by:
                message = (
                    f"File {path.name} for table {unit.table} would overwrite the one "
                    f"written for table {written_by[path]}; skipped"
                )
                logger.warning(message)
                result.warnings.append(message)
                continue

            try:
                self._write_file(path, unit.code)
            except OSError as e:
                # One bad file must not stop the remaining tables
                logger.error("Write failed for %s (table %s): %s", path, unit.table, e)
                result.failed[path] = str(e)
                continue

            written_by[path] = unit.table
            result.written.append(path)
            self._format_file(path)

    def _create_directory(self, directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Base path create failed: %s", directory)
            raise WriteError(directory, e) from e

    def _write_file(self, path: Path, content: str) -> None:
        path.write_text(self.generator.format_code(content), encoding="utf-8")
        logger.info("Wrote %s", path)

    def _format_file(self, path: Path) -> None:
        if self.config.run_gofmt:
            run_gofmt(path)


def run_gofmt(path: Path) -> bool:
    """Run ``gofmt -w`` on a file. Failures are logged and ignored.

    Returns:
        True if gofmt ran and succeeded.
    """
    gofmt = shutil.which("gofmt")
    if gofmt is None:
        logger.debug("gofmt not found on PATH; leaving %s unformatted", path)
        return False

    try:
        completed = subprocess.run(
            [gofmt, "-w", str(path)],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        logger.debug("gofmt could not run on %s: %s", path, e)
        return False

    if completed.returncode != 0:
        logger.debug("gofmt failed on %s: %s", path, completed.stderr.strip())
        return False

    return True
