"""
Template extraction.

Runs ``xgettext`` over the project's source files and installs the result as
the template. The extractor writes to a temporary file beside the template,
which replaces the template only after a successful exit, so a failed or
interrupted extraction never leaves a truncated template behind.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ..config.schema import ExtractionConfig
from ..utils.core.exceptions import ExtractionError
from ..utils.core.process import ToolRunner, format_command, run_tool
from .run_config import RunConfig

logger = logging.getLogger(__name__)


def collect_source_files(
    root: Path, patterns: Sequence[str], exclude: Sequence[str] = ()
) -> list[Path]:
    """
    Collect the source files to scan for translatable strings.

    Args:
        root: Project root the patterns are relative to
        patterns: Glob patterns of files to include
        exclude: Glob patterns of files to leave out

    Returns:
        Sorted, de-duplicated file paths relative to the root
    """
    # A pattern may match a directory (``vendor/**``); everything below it is excluded.
    excluded: set[Path] = set()
    for pattern in exclude:
        excluded.update(root.glob(pattern))

    files: set[Path] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if not path.is_file() or path in excluded:
                continue
            if any(parent in excluded for parent in path.parents):
                continue
            files.add(path.relative_to(root))

    return sorted(files)


def build_extract_command(
    executable: str,
    options: ExtractionConfig,
    files_from: Path,
    output: Path,
) -> list[str]:
    """
    Build the xgettext command line.

    Args:
        executable: xgettext executable
        options: Extraction options
        files_from: File listing the sources to scan, one per line
        output: Where xgettext writes the template

    Returns:
        Command as a list of arguments
    """
    command = [
        executable,
        f"--from-code={options.from_code}",
        f"--language={options.language}",
        "--force-po",
        "--no-wrap",
    ]
    command.extend(f"--keyword={keyword}" for keyword in options.keywords)
    if options.add_comments:
        command.append(f"--add-comments={options.add_comments}")
    if options.package_name:
        command.append(f"--package-name={options.package_name}")
    command.extend([f"--output={output}", f"--files-from={files_from}"])
    return command


def extract(config: RunConfig, runner: ToolRunner = run_tool) -> Path:
    """
    Regenerate the template from the source tree.

    Args:
        config: Run configuration
        runner: Executes the extractor

    Returns:
        Path to the template

    Raises:
        ExtractionError: If there is nothing to scan or the extractor fails
    """
    settings = config.settings
    root = config.paths.root
    template = config.paths.template_file

    sources = collect_source_files(
        root, settings.extraction.sources, settings.extraction.exclude
    )
    if not sources:
        raise ExtractionError(
            f"No source files matched {settings.extraction.sources} under {root}"
        )

    logger.info(f"Extracting messages from {len(sources)} source file(s) into {template}")

    if config.dry_run:
        command = build_extract_command(
            settings.tools.xgettext,
            settings.extraction,
            Path("<source list>"),
            template,
        )
        logger.info(f"DRY RUN: Would run {format_command(command)}")
        return template

    _ = template.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(prefix="catalog-sync-") as work_dir:
        files_from = Path(work_dir) / "sources.txt"
        _ = files_from.write_text(
            "".join(f"{source.as_posix()}\n" for source in sources), encoding="utf-8"
        )

        with tempfile.NamedTemporaryFile(
            dir=template.parent,
            prefix=f".{template.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_output = Path(temp_file.name)

        command = build_extract_command(
            settings.tools.xgettext, settings.extraction, files_from, temp_output
        )

        try:
            try:
                result = runner(command, cwd=root)
            except FileNotFoundError as e:
                raise ExtractionError(
                    f"Extractor not found: {settings.tools.xgettext}. "
                    "Install the gettext tools to extract messages.",
                    command=command,
                ) from e

            if not result.ok:
                logger.error(f"Extraction failed:\n{result.stderr.rstrip()}")
                raise ExtractionError(
                    f"{settings.tools.xgettext} exited with status {result.returncode}",
                    command=command,
                    returncode=result.returncode,
                    stderr=result.stderr,
                )

            if not temp_output.exists() or temp_output.stat().st_size == 0:
                raise ExtractionError(
                    f"{settings.tools.xgettext} produced no template output",
                    command=command,
                    returncode=result.returncode,
                    stderr=result.stderr,
                )

            _ = temp_output.replace(template)
        finally:
            temp_output.unlink(missing_ok=True)

    logger.info(f"Updated template {template}")
    return template
