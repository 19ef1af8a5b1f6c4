"""Interactive CLI features."""

import asyncio

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from linguabridge.core.relay import MessageRelay
from linguabridge.translation.languages import LANGUAGE_NAMES, SUPPORTED_LANGUAGES

console = Console()


def show_welcome():
    """Show welcome banner."""
    banner = """
[bold blue]╔══════════════════════════════════════════════════════════╗[/bold blue]
[bold blue]║[/bold blue]          [bold cyan]LinguaBridge[/bold cyan] - Real-time Translation Relay       [bold blue]║[/bold blue]
[bold blue]╚══════════════════════════════════════════════════════════╝[/bold blue]

[yellow]Translation sources:[/yellow]
  ✓ Verified phrase dictionary (no network)
  ✓ Google Translate, Bing Translator, MyMemory, LibreTranslate
  ✓ Strict content filtering and quality thresholds
  ✓ Tagged fallback when every provider fails

[green]Quick Start:[/green]
  linguabridge translate "good morning" -s en -t hi
  linguabridge chat -s en -t es
  linguabridge languages
  linguabridge providers --check
"""
    console.print(banner)


def show_languages():
    table = Table(title="Supported Languages")
    table.add_column("Code", style="cyan")
    table.add_column("Language")
    for code in SUPPORTED_LANGUAGES:
        table.add_row(code, LANGUAGE_NAMES[code])
    console.print(table)


def interactive_chat(relay: MessageRelay, source_lang: str, target_lang: str):
    """
    Chat loop: every line typed is relayed like a client message.

    ``/swap`` flips the direction, ``/quit`` (or an empty line) leaves.
    """
    console.print(f"\n[bold cyan]═══ Chat {source_lang} → {target_lang} ═══[/bold cyan]")
    console.print("[dim]/swap to flip direction, /quit to leave[/dim]\n")

    while True:
        message = Prompt.ask(f"[yellow]{source_lang}[/yellow]", default="")
        if not message.strip() or message.strip() == "/quit":
            break
        if message.strip() == "/swap":
            source_lang, target_lang = target_lang, source_lang
            console.print(f"[dim]Now translating {source_lang} → {target_lang}[/dim]")
            continue

        reply = asyncio.run(relay.handle({
            "message": message,
            "sourceLang": source_lang,
            "targetLang": target_lang,
        }))

        if reply.get("error"):
            console.print(f"[red]✗ {reply['error']['message']}[/red]")
            continue

        color = "yellow" if reply["isFallback"] else "green"
        console.print(f"[{color}]{reply['targetLang']}[/{color}] {reply['translated']}  [dim]({reply['provider']})[/dim]")
