# Copyright (c) Syntropy Systems
"""slmbench doctor command."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from slmbench.client import CompletionError, get_client
from slmbench.config import ConfigError, load_config

console = Console()


def doctor(
    url: Optional[str] = typer.Option(None, "--url", help="LLM server URL"),
    model: Optional[str] = typer.Option(None, "--model", help="Model name"),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        help="Path to a slmbench.yaml file",
    ),
) -> None:
    """Check slmbench setup and diagnose issues.

    Verifies:
    - configuration loads
    - the server is reachable
    - the model is installed on the server
    """
    issues: list[str] = []

    try:
        config = load_config(config_file)
    except ConfigError as e:
        console.print(f"[red]✗[/red] Config: {escape(str(e))}")
        raise typer.Exit(1) from e

    if config.source is not None:
        console.print(f"[green]✓[/green] Config file: {config.source}")
    else:
        console.print("[dim]•[/dim] No config file found, using defaults")

    server_url = url or config.url
    model_name = model or config.model

    with get_client(server_url, timeout=10.0) as client:
        try:
            version = client.version()
        except CompletionError as e:
            console.print(f"[red]✗[/red] Server {escape(server_url)}: {escape(str(e))}")
            issues.append("Server unreachable")
        else:
            console.print(
                f"[green]✓[/green] Server {escape(server_url)}: version {escape(version)}"
            )

            try:
                installed = [m.name for m in client.list_models()]
            except CompletionError as e:
                console.print(f"[yellow]⚠[/yellow] Could not list models: {escape(str(e))}")
                issues.append("Model list unavailable")
            else:
                if model_name in installed:
                    console.print(f"[green]✓[/green] Model: {escape(model_name)}")
                else:
                    console.print(
                        f"[red]✗[/red] Model {escape(model_name)} is not installed "
                        f"({len(installed)} models available)"
                    )
                    issues.append(f"Model {model_name} missing")

    # Summary
    console.print()
    if issues:
        console.print(f"[red]Found {len(issues)} issue(s)[/red]")
        for issue in issues:
            console.print(f"  - {escape(issue)}")
        raise typer.Exit(1)
    console.print("[green]All checks passed[/green]")
