# Copyright (c) Syntropy Systems
"""Console rendering and JSON export of test results."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError
from rich.markup import escape

from slmbench.catalog import PROMPTS
from slmbench.models.result import TestResult

if TYPE_CHECKING:
    from datetime import timedelta

    from rich.console import Console

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40
DEFAULT_BASE_NAME = "test_results"
EXPORT_TIME_FORMAT = "%Y%m%d_%H%M%S"
MAX_EXPORT_ATTEMPTS = 100

_RESULTS_ADAPTER = TypeAdapter(list[TestResult])


class ExportError(Exception):
    """Results could not be written to or read from disk."""


def format_elapsed(seconds: float) -> str:
    """Format a duration in seconds to human readable."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    total = int(seconds)
    if total < 3600:
        m, s = divmod(total, 60)
        return f"{m}m {s}s"
    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    return f"{h}h {m}m {s}s"


def _print_verbatim(console: Console, text: str, prefix: str = "") -> None:
    # No markup, emoji codes, highlighting or hard wrapping
    console.print(
        prefix + text, markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def print_result(console: Console, result: TestResult) -> None:
    """Print one result with its configuration, metrics and response."""
    metrics = result.metrics
    prompt_text = PROMPTS.get(result.prompt, "")

    console.print(f"\n{SEPARATOR}")
    console.print("[bold]>> Test Configuration:[/bold]")
    console.print(f"> Config: [cyan]{escape(result.config)}[/cyan]")
    console.print(f"> Prompt: [cyan]{escape(result.prompt)}[/cyan]")
    _print_verbatim(console, prompt_text, prefix="> Prompt text: ")

    console.print("\n[bold]Metrics:[/bold]")
    console.print(
        f"- Response time: {format_elapsed(metrics.response_time.total_seconds())}"
    )
    console.print(f"- Character count: {metrics.char_count}")
    console.print(f"- Word count: {metrics.word_count}")

    console.print("\n[bold]Response:[/bold]")
    _print_verbatim(console, result.response)
    console.print(f"\n{SEPARATOR}")


def print_summary(console: Console, count: int, elapsed: timedelta) -> None:
    """Print the number of recorded results and the total run time."""
    console.print(
        f"\n[bold]Completed {count} tests in "
        f"{format_elapsed(elapsed.total_seconds())}[/bold]"
    )


def export_filename(base_name: str, now: datetime | None = None) -> str:
    """Build ``<base>_<YYYYMMDD_HHMMSS>.json`` from the export time."""
    now = now or datetime.now()  # noqa: DTZ005 - local wall-clock time
    return f"{base_name}_{now.strftime(EXPORT_TIME_FORMAT)}.json"


def export_results(
    results: list[TestResult],
    base_name: str = DEFAULT_BASE_NAME,
    output_dir: Path | None = None,
    now: datetime | None = None,
) -> Path:
    """Write all results to a single pretty-printed JSON array.

    An existing file is never overwritten: exports that land on the same
    second get a numeric suffix, ``<base>_<time>_1.json`` and so on.

    Returns:
        Path of the written file

    Raises:
        ExportError: The file could not be created or written, or every
            suffixed name is taken

    """
    output_dir = output_dir or Path()
    filename = export_filename(base_name, now)
    stem = filename.removesuffix(".json")
    payload = _RESULTS_ADAPTER.dump_json(results, indent=2, by_alias=True) + b"\n"

    for attempt in range(MAX_EXPORT_ATTEMPTS):
        path = output_dir / (filename if attempt == 0 else f"{stem}_{attempt}.json")
        try:
            with path.open("xb") as f:
                _ = f.write(payload)
        except FileExistsError:
            logger.debug("Export file %s exists, trying next suffix", path)
            continue
        except OSError as e:
            msg = f"failed to write {path}: {e}"
            raise ExportError(msg) from e

        logger.info("Exported %d results to %s", len(results), path)
        return path

    msg = f"no free export filename for {filename} in {output_dir}"
    raise ExportError(msg)


def load_results(path: Path) -> list[TestResult]:
    """Read results back from an export file.

    Raises:
        ExportError: The file is missing or is not a results export

    """
    try:
        return _RESULTS_ADAPTER.validate_json(path.read_bytes())
    except OSError as e:
        msg = f"failed to read {path}: {e}"
        raise ExportError(msg) from e
    except ValidationError as e:
        msg = f"{path} is not a results export: {e}"
        raise ExportError(msg) from e
