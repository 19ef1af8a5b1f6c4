"""Main CLI interface using Typer."""

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from linguabridge.core.config import KNOWN_PROVIDERS, ProviderConfig
from linguabridge.core.engine import ResolutionEngine
from linguabridge.core.exceptions import ConfigurationError, InvalidRequest, SameLanguageError
from linguabridge.core.relay import MessageRelay
from linguabridge.translation.languages import language_name, normalize
from linguabridge.translation.phrases import get_phrase_dictionary
from linguabridge.utils.config_loader import load_config
from linguabridge.utils.logger import setup_logger
from linguabridge.utils.provider_checker import get_all_providers_status
from .interactive import show_welcome, show_languages, interactive_chat

app = typer.Typer(
    name="linguabridge",
    help="LinguaBridge: real-time text translation relay",
    add_completion=False
)

console = Console()


def _load(config_path: Optional[Path], strategy: Optional[str] = None, debug: bool = False) -> dict:
    config = load_config(str(config_path) if config_path else None)
    if strategy:
        config.setdefault("resolution", {})["strategy"] = strategy
    logging_cfg = config.get("logging") or {}
    setup_logger(
        level="DEBUG" if debug else str(logging_cfg.get("level", "WARNING")),
        log_file=logging_cfg.get("file"),
    )
    return config


def _engine(config: dict) -> ResolutionEngine:
    try:
        return ResolutionEngine(config=ProviderConfig.from_dict(config))
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(2)


@app.command()
def translate(
    message: str = typer.Argument(..., help="Text to translate (max 500 characters)"),
    source_lang: str = typer.Option("en", "-s", "--source", help="Source language (code or name)"),
    target_lang: str = typer.Option("hi", "-t", "--target", help="Target language (code or name)"),
    strategy: Optional[str] = typer.Option(None, "--strategy", help="Provider strategy: sequential/race"),
    config_path: Optional[Path] = typer.Option(None, "-c", "--config", help="YAML config file"),
    as_json: bool = typer.Option(False, "--json", help="Print the wire payload as JSON"),
    debug: bool = typer.Option(False, "--debug/--no-debug", help="Enable debug logging"),
):
    """Translate a single message."""
    engine = _engine(_load(config_path, strategy, debug))

    try:
        result = engine.resolve_sync(message, source_lang, target_lang)
    except (InvalidRequest, SameLanguageError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    color = "yellow" if result.is_fallback else "green"
    console.print(f"[bold]{result.source_lang} → {result.target_lang}[/bold] [dim]via {result.provider}[/dim]")
    console.print(f"[{color}]{result.translated}[/{color}]")


@app.command()
def chat(
    source_lang: str = typer.Option("en", "-s", "--source", help="Source language"),
    target_lang: str = typer.Option("hi", "-t", "--target", help="Target language"),
    config_path: Optional[Path] = typer.Option(None, "-c", "--config", help="YAML config file"),
):
    """Interactive translation chat."""
    show_welcome()
    relay = MessageRelay(_engine(_load(config_path)))
    interactive_chat(relay, normalize(source_lang), normalize(target_lang))


@app.command()
def languages():
    """List supported languages."""
    show_languages()


@app.command()
def phrases(
    source_lang: str = typer.Option("en", "-s", "--source", help="Source language"),
    target_lang: str = typer.Option("hi", "-t", "--target", help="Target language"),
):
    """Show the verified phrases for a direction."""
    source, target = normalize(source_lang), normalize(target_lang)
    dictionary = get_phrase_dictionary()

    if (source, target) not in dictionary:
        available = ", ".join(f"{s}-{t}" for s, t in dictionary.directions())
        console.print(f"[yellow]No verified phrases for {source}-{target}.[/yellow] Available: {available}")
        return

    table = Table(title=f"Verified phrases {language_name(source)} → {language_name(target)}")
    table.add_column("Phrase", style="cyan")
    table.add_column("Translation")
    for phrase, translation in dictionary.phrases_for(source, target).items():
        table.add_row(phrase, translation)
    console.print(table)


@app.command()
def providers(
    check: bool = typer.Option(False, "--check", help="Probe each provider endpoint"),
    config_path: Optional[Path] = typer.Option(None, "-c", "--config", help="YAML config file"),
):
    """List translation providers and routing."""
    try:
        config = ProviderConfig.from_dict(_load(config_path))
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(2)

    statuses = get_all_providers_status(config) if check else {}

    table = Table(title=f"Translation Providers ({config.strategy})")
    table.add_column("Provider", style="cyan")
    table.add_column("Endpoint")
    table.add_column("Timeout")
    if check:
        table.add_column("Status")

    for name in KNOWN_PROVIDERS:
        row = [name, config.endpoints[name], f"{config.timeouts[name]:g}s"]
        if check:
            status = statuses[name]
            if status["reachable"]:
                row.append(f"[green]✓ {status['status_code']} ({status['latency']}s)[/green]")
            else:
                row.append(f"[red]✗ {status['error'] or status['status_code']}[/red]")
        table.add_row(*row)
    console.print(table)

    console.print(f"\n[bold]Default order:[/bold] {' → '.join(config.default_order)}")
    for key, names in config.routes.items():
        console.print(f"  {key}: {' → '.join(names)}")


def cli():
    """Main CLI entry point."""
    if len(sys.argv) == 1:
        show_welcome()
        console.print("\n[dim]Type 'linguabridge --help' for usage information[/dim]\n")
        return

    app()


if __name__ == "__main__":
    cli()
