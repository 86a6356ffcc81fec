"""Interaktiver Setup-Wizard für die Ersteinrichtung der Zimmerverwaltung.

Nutzt rich für die Konsolenausgabe und Eingabe.
"""

from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table
from rich import box

from config.defaults import default_hostel_config
from config.schema import HostelConfig, LoggingConfig, StorageConfig

console = Console()


def _header(title: str) -> None:
    console.print()
    console.print(Panel(f"[bold cyan]{title}[/bold cyan]", expand=False))


def _info(text: str) -> None:
    console.print(f"[dim]{text}[/dim]")


def _success(text: str) -> None:
    console.print(f"[green]✓[/green] {text}")


def show_config_table(config: HostelConfig) -> None:
    """Zeigt die Konfiguration als rich-Tabelle an."""
    table = Table(title="Konfiguration", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    table.add_row("Wohnheim", escape(config.hostel_name))
    table.add_row("Zimmer", str(config.num_rooms))
    table.add_row("Belegungsliste", config.storage.data_file)
    table.add_row("Zimmerbericht", config.storage.room_report_file)
    table.add_row("Log-Level", config.logging.level)
    console.print(table)


def _wizard_hostel() -> tuple[str, int]:
    _header("Schritt 1 — Wohnheim")
    defaults = default_hostel_config()
    name = Prompt.ask("Name des Wohnheims", default=defaults.hostel_name)
    _info("Die Zimmeranzahl ist danach fest; Zimmer-IDs laufen von 1 bis N.")
    num_rooms = IntPrompt.ask("Anzahl Zimmer", default=defaults.num_rooms)
    return name, num_rooms


def _wizard_storage() -> StorageConfig:
    _header("Schritt 2 — Dateien")
    defaults = StorageConfig()
    data_file = Prompt.ask("Datei der Belegungsliste", default=defaults.data_file)
    report_file = Prompt.ask("Datei für den Zimmerbericht",
                             default=defaults.room_report_file)
    return StorageConfig(data_file=data_file, room_report_file=report_file)


def run_wizard() -> Optional[HostelConfig]:
    """Führt den interaktiven Setup-Wizard aus.

    Returns:
        Fertige HostelConfig oder None, wenn der Nutzer abbricht.
    """
    console.print()
    console.print(Panel(
        "[bold]Willkommen bei der Wohnheim-Zimmerverwaltung![/bold]\n\n"
        "Der Wizard fragt Zimmeranzahl und Dateipfade ab.\n"
        "[dim]Standard-Werte können mit Enter übernommen werden.[/dim]",
        title="[bold cyan]Einrichtung[/bold cyan]",
        border_style="cyan",
    ))

    try:
        name, num_rooms = _wizard_hostel()
        storage = _wizard_storage()
        config = HostelConfig(
            hostel_name=name,
            num_rooms=num_rooms,
            storage=storage,
            logging=LoggingConfig(),
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Wizard abgebrochen.[/yellow]")
        return None
    except ValidationError as e:
        console.print(f"\n[red]Fehler während der Konfiguration: {escape(str(e))}[/red]")
        return None

    show_config_table(config)
    if not Confirm.ask("\nKonfiguration speichern?", default=True):
        console.print("[yellow]Konfiguration wird nicht gespeichert.[/yellow]")
        return None

    _success("Konfiguration wird gespeichert...")
    return config
