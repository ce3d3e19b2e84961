"""CLI for deploying serverless components of an app spec through nim."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .appspec import AppSpecLoader, AppSpecLoadError
from .config import settings
from .core.exceptions import ProcessInvocationError, ServerlessError
from .nim import NimRunner, get_nim_path
from .observability import setup_logging
from .serverless import EndpointInjector, convert_to_nim_project, deploy_app

app = typer.Typer(
    name="nimbridge",
    help="Deploy the serverless components of an app spec with nim",
    add_completion=False,
)
console = Console()


def _runner() -> NimRunner:
    return NimRunner(settings.nim_path)


def _report_error(prefix: str, e: Exception) -> None:
    console.print(f"[red]✗ {prefix}:[/red]\n{escape(str(e))}")
    if isinstance(e, ProcessInvocationError) and e.output:
        console.print(escape(e.output), highlight=False)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to NIMBRIDGE_LOG_LEVEL)"
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit JSON logs"),
):
    """Configure logging for every command."""
    setup_logging(
        level=log_level or settings.log_level,
        json_format=json_logs or settings.log_json,
        log_file=settings.log_file,
    )


# ============================================================================
# Validate Command
# ============================================================================


@app.command()
def validate(
    spec_file: Path = typer.Argument(..., help="Path to app spec YAML/JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Validate an app spec and show the nim project of each serverless component."""
    console.print(f"[bold]Validating app spec:[/bold] {spec_file}")

    try:
        # 1. Load and validate
        spec = AppSpecLoader().load(spec_file)

        # 2. Translate every serverless component
        table = Table(title="Serverless Projects")
        table.add_column("Component", style="cyan")
        table.add_column("Project", style="green")
        for component in spec.serverless:
            table.add_row(component.name, convert_to_nim_project(component))

    except AppSpecLoadError as e:
        _report_error("Validation failed", e)
        raise typer.Exit(code=1)
    except ServerlessError as e:
        _report_error("Invalid serverless component", e)
        raise typer.Exit(code=1)

    console.print("[green]✓ App spec is valid[/green]")

    if verbose:
        console.print(f"\n[bold]App:[/bold] {spec.name}")
        console.print(f"[bold]Serverless components:[/bold] {len(spec.serverless)}")
        console.print(f"[bold]Static sites:[/bold] {len(spec.static_sites)}")
        console.print(table)


# ============================================================================
# Deploy Command
# ============================================================================


@app.command()
def deploy(
    spec_file: Path = typer.Argument(..., help="Path to app spec YAML/JSON file"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the patched app spec to this file"
    ),
):
    """Deploy serverless components and inject SERVERLESS_URL into static sites."""
    console.print(f"[bold]Deploying serverless components of:[/bold] {spec_file}")

    loader = AppSpecLoader()
    try:
        # 1. Load and validate
        spec = loader.load(spec_file)

        # 2. Deploy, then inject the endpoint into static sites
        result = deploy_app(spec, _runner())
    except AppSpecLoadError as e:
        _report_error("Validation failed", e)
        raise typer.Exit(code=1)
    except ServerlessError as e:
        _report_error("Deployment failed", e)
        raise typer.Exit(code=1)

    if not result.projects:
        console.print("[yellow]No serverless components to deploy[/yellow]")
        return

    console.print(escape(result.output), highlight=False)
    console.print(f"[green]✓ Deployed {len(result.projects)} project(s)[/green]")

    if result.endpoint:
        console.print(
            f"[green]✓ SERVERLESS_URL={result.endpoint} added to:[/green] "
            f"{', '.join(result.patched_sites)}"
        )

    # 3. Write the patched spec
    if output:
        loader.dump(spec, output)
        console.print(f"[green]✓ Patched app spec written to {output}[/green]")
    elif result.patched_sites:
        console.print(loader.dump(spec), highlight=False, markup=False)


# ============================================================================
# Endpoint Command
# ============================================================================


@app.command()
def endpoint():
    """Show the web endpoint of the current nim namespace."""
    try:
        url = EndpointInjector(_runner()).fetch_endpoint()
    except ServerlessError as e:
        _report_error("Cannot get endpoint", e)
        raise typer.Exit(code=1)

    console.print(url, highlight=False, markup=False)


# ============================================================================
# Nim Path Command
# ============================================================================


@app.command("nim-path")
def nim_path():
    """Show where nim is expected to be installed."""
    try:
        path = settings.nim_path or get_nim_path()
    except ServerlessError as e:
        _report_error("Cannot locate nim", e)
        raise typer.Exit(code=1)

    console.print(str(path), highlight=False, markup=False)
    if not Path(path).exists():
        console.print("[yellow]nim is not installed at this location[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
