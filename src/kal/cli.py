"""kal CLI — Typer application with linters, check-config and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from kal import __version__

app = typer.Typer(
    name="kal",
    help="Inspect the linter registry and validate kal configuration.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load(root: Path, config: Optional[str]):
    from kal.config.loader import ConfigLoadError, load_config

    try:
        return load_config(root, config)
    except ConfigLoadError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _exit_on_errors(errs) -> None:
    """Print every configuration error and exit 1 if there are any."""
    if not errs:
        return
    console.print(f"[bold red]Found {len(errs)} configuration error(s):[/bold red]")
    for err in errs:
        console.print(f"  {err.error()}", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


# ── linters ───────────────────────────────────────────────────────────────────


@app.command()
def linters(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .kal.toml / .kal.yaml"),
    enable: List[str] = typer.Option([], "--enable", "-E", help="Enable a linter ('*' for all)"),
    disable: List[str] = typer.Option([], "--disable", "-D", help="Disable a linter ('*' for all)"),
) -> None:
    """List known linters and whether the configuration enables them."""
    import dataclasses

    from kal.analysis.registry import new_registry
    from kal.validation import validate_config

    registry = new_registry()
    cfg = _load(Path.cwd(), config)
    cfg = dataclasses.replace(cfg, linters=cfg.linters.extend(enable, disable))
    _exit_on_errors(validate_config(cfg, registry))
    selection = cfg.linters

    table = Table(title="Linters", title_style="bold", border_style="dim")
    table.add_column("Linter", style="cyan", min_width=20)
    table.add_column("Default", justify="center")
    table.add_column("Enabled", justify="center")

    for initializer in registry.initializers:
        enabled = registry.is_enabled(initializer, selection)
        table.add_row(
            initializer.name,
            "yes" if initializer.default_enabled else "no",
            "[green]yes[/green]" if enabled else "[dim]no[/dim]",
        )

    Console().print(table)


# ── check-config ──────────────────────────────────────────────────────────────


@app.command("check-config")
def check_config(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .kal.toml / .kal.yaml"),
    strict: bool = typer.Option(
        False, "--strict", help="Reject unknown linters and linters both enabled and disabled"
    ),
) -> None:
    """Validate the configuration without running any linter."""
    from kal.analysis.registry import new_registry
    from kal.validation import validate_config

    registry = new_registry()
    cfg = _load(Path.cwd(), config)

    _exit_on_errors(validate_config(cfg, registry, strict=strict))

    analyzers = registry.initialize_linters(cfg.linters, cfg.linters_config)
    console.print(
        f"[green]✓[/green] Configuration is valid — "
        f"{len(analyzers)} linter(s) enabled: {', '.join(a.name for a in analyzers) or 'none'}",
        soft_wrap=True,
    )


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .kal.toml in the current directory."""
    from kal.config.defaults import DEFAULT_TOML

    config_path = Path.cwd() / ".kal.toml"

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  .kal.toml already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"kal {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
) -> None:
    """kal — linter registry and configuration checks for API types."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
