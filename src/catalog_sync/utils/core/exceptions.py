"""
Exception classes for catalog-sync.

Every failure the orchestrator can report is a ``CatalogSyncError``. Each one
records the pipeline stage it happened in and, where relevant, the language
being processed, so the operator can tell exactly what to fix before re-running.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Stage(Enum):
    """Pipeline stages an error can be attributed to."""

    CONFIGURE = "configure"
    EXTRACT = "extract"
    MERGE = "merge"
    COMPILE = "compile"
    CHECK = "check"


class CatalogSyncError(Exception):
    """Base exception class for catalog-sync specific errors."""

    def __init__(
        self,
        message: str,
        stage: Stage = Stage.CONFIGURE,
        language: str | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.stage: Stage = stage
        self.language: str | None = language
        self.user_message: str = user_message or message


class ConfigError(CatalogSyncError):
    """Invalid, contradictory or unreadable configuration."""

    def __init__(self, message: str, user_message: str | None = None) -> None:
        super().__init__(message, stage=Stage.CONFIGURE, user_message=user_message)


class LanguageNotFound(ConfigError):
    """The requested language filter matches no catalog."""

    def __init__(
        self,
        requested: str,
        available: Sequence[str],
        catalog_dir: str,
        template_file: str,
    ) -> None:
        self.requested: str = requested
        self.available: tuple[str, ...] = tuple(available)

        valid = ", ".join(self.available) if self.available else "(none)"
        message = (
            f"No catalog found for language '{requested}' in {catalog_dir}.\n"
            f"Valid language codes: {valid}\n"
            f"To start translating a new language, copy the template to a catalog "
            f"named after the language's ISO 639-1 code, e.g.:\n"
            f"    cp {template_file} {catalog_dir}/<ll>.po\n"
            f"then fill in the header and re-run."
        )
        super().__init__(message)
        self.language = requested


class ToolError(CatalogSyncError):
    """An external gettext tool exited with a nonzero status or could not be started."""

    def __init__(
        self,
        message: str,
        stage: Stage,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
        language: str | None = None,
    ) -> None:
        super().__init__(message, stage=stage, language=language)
        self.command: tuple[str, ...] = tuple(command)
        self.returncode: int | None = returncode
        self.stderr: str = stderr


class ExtractionError(ToolError):
    """Template extraction failed."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(
            message,
            stage=Stage.EXTRACT,
            command=command,
            returncode=returncode,
            stderr=stderr,
        )


class MergeError(ToolError):
    """Merging a catalog against the template failed."""

    def __init__(
        self,
        message: str,
        language: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(
            message,
            stage=Stage.MERGE,
            command=command,
            returncode=returncode,
            stderr=stderr,
            language=language,
        )


class CompileError(ToolError):
    """Compiling a catalog to its binary form failed."""

    def __init__(
        self,
        message: str,
        language: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(
            message,
            stage=Stage.COMPILE,
            command=command,
            returncode=returncode,
            stderr=stderr,
            language=language,
        )
