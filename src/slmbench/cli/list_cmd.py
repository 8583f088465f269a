# Copyright (c) Syntropy Systems
"""slmbench list command."""
from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from slmbench.catalog import CONFIGS, PATTERNS, PROMPTS

console = Console()

CATALOGS = ("prompts", "configs", "patterns")
PROMPT_PREVIEW_WIDTH = 70


def _preview(text: str) -> str:
    first_line = text.splitlines()[0] if text else ""
    if len(first_line) > PROMPT_PREVIEW_WIDTH or first_line != text:
        return first_line[: PROMPT_PREVIEW_WIDTH - 3] + "..."
    return first_line


def _prompts_table() -> Table:
    table = Table(title="Prompts", show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Prompt")
    for key, text in PROMPTS.items():
        table.add_row(key, escape(_preview(text)))
    return table


def _configs_table() -> Table:
    table = Table(title="Configs", show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Options")
    for key, options in CONFIGS.items():
        table.add_row(key, ", ".join(f"{k}={v}" for k, v in options.items()))
    return table


def _patterns_table() -> Table:
    table = Table(title="Patterns", show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Prompts")
    for key, prompt_keys in PATTERNS.items():
        table.add_row(key, ", ".join(prompt_keys))
    return table


def list_catalogs(
    catalog: str = typer.Argument(
        "all",
        help="Catalog to show: prompts, configs, patterns or all",
    ),
) -> None:
    """List the available prompts, configs and patterns."""
    if catalog != "all" and catalog not in CATALOGS:
        console.print(
            f"[red]Unknown catalog '{escape(catalog)}'.[/red] "
            f"Choose from: {', '.join(CATALOGS)}, all"
        )
        raise typer.Exit(1)

    builders = {
        "prompts": _prompts_table,
        "configs": _configs_table,
        "patterns": _patterns_table,
    }
    selected = CATALOGS if catalog == "all" else (catalog,)
    for name in selected:
        console.print(builders[name]())
