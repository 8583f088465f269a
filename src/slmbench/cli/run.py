# Copyright (c) Syntropy Systems
"""slmbench run command."""
from __future__ import annotations

import random
import time
from datetime import timedelta
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from slmbench.client import get_client
from slmbench.config import ConfigError, load_config
from slmbench.executor import PairFailure, run_matrix
from slmbench.report import ExportError, export_results, print_result, print_summary
from slmbench.selector import InvalidKeyError, SelectionError, resolve_matrix

console = Console()


def _announce(prompt: str, config: str) -> None:
    console.print(
        f"Running '[cyan]{escape(prompt)}[/cyan]' with "
        f"[cyan]{escape(config)}[/cyan] configuration:"
    )


def _report_failure(failure: PairFailure) -> None:
    console.print(
        f"[red]Error testing prompt {escape(failure.prompt)} with config "
        f"{escape(failure.config)}:[/red] {escape(failure.error)}"
    )


def run(  # noqa: PLR0913
    prompts: Optional[str] = typer.Option(
        None,
        "--prompts",
        help="Comma-separated list of specific prompts to test",
    ),
    configs: Optional[str] = typer.Option(
        None,
        "--configs",
        help="Comma-separated list of model configurations",
    ),
    patterns: Optional[str] = typer.Option(
        None,
        "--patterns",
        help="Comma-separated list of test patterns to run",
    ),
    prompt_range: Optional[str] = typer.Option(
        None,
        "--prompt-range",
        help="Catalog index range of prompts, START:END",
    ),
    config_range: Optional[str] = typer.Option(
        None,
        "--config-range",
        help="Catalog index range of configs, START:END",
    ),
    random_prompts: Optional[int] = typer.Option(
        None,
        "--random-prompts",
        min=0,
        help="Prompts to pick when no prompts or patterns are given",
    ),
    random_configs: Optional[int] = typer.Option(
        None,
        "--random-configs",
        min=0,
        help="Configs to pick when no prompts or patterns are given",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for the random selection",
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url",
        help="LLM server URL",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="Model name",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        min=0,
        help="Per-request timeout in seconds",
    ),
    print_results: bool = typer.Option(
        True,
        "--print/--no-print",
        help="Print results to console",
    ),
    export: bool = typer.Option(
        False,
        "--export",
        help="Export results to a JSON file",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the JSON export",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        help="Path to a slmbench.yaml file",
    ),
) -> None:
    """Run prompts against the model under each sampling configuration.

    Without --prompts, --patterns or a range, runs a random selection.

    Examples:
        slmbench run --patterns language,technical
        slmbench run --configs Ultra-Precise,Creative-High
        slmbench run --prompts idiom,proverb,metaphor
        slmbench run --patterns language --configs Ultra-Precise
        slmbench run --patterns technical --export

    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    try:
        matrix = resolve_matrix(
            prompts,
            configs,
            patterns,
            prompt_range=prompt_range,
            config_range=config_range,
            random_prompts=(
                random_prompts if random_prompts is not None else config.random_prompts
            ),
            random_configs=(
                random_configs if random_configs is not None else config.random_configs
            ),
            rng=random.Random(seed) if seed is not None else None,  # noqa: S311
        )
    except InvalidKeyError as e:
        console.print(f"[red]Error parsing {e.field}s:[/red] {escape(str(e))}")
        console.print(f"Available {e.field}s: {', '.join(e.valid_keys)}")
        raise typer.Exit(1) from e
    except SelectionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    server_url = url or config.url
    model_name = model or config.model

    console.print(
        f"[bold]{len(matrix)} tests[/bold] "
        f"({len(matrix.prompts)} prompts x {len(matrix.configs)} configs) "
        f"on [cyan]{escape(model_name)}[/cyan] at {escape(server_url)}"
    )

    start = time.perf_counter()
    with get_client(server_url, timeout if timeout is not None else config.timeout) as client:
        results = run_matrix(
            client,
            matrix,
            model_name,
            on_start=_announce,
            on_result=(lambda r: print_result(console, r)) if print_results else None,
            on_error=_report_failure,
        )

    export_failed = False
    if export:
        try:
            path = export_results(results, output_dir=output_dir or config.export_dir)
        except ExportError as e:
            console.print(f"[red]Error exporting results:[/red] {escape(str(e))}")
            export_failed = True
        else:
            console.print(f"\nResults exported to: {path}")

    print_summary(console, len(results), timedelta(seconds=time.perf_counter() - start))

    if export_failed:
        raise typer.Exit(1)
