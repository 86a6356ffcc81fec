"""Wohnheim-Zimmerverwaltung — Haupt-CLI.

Verwendung:
  python main.py                          Interaktives Menü (wie 'menu')
  python main.py setup                    Ersteinrichtung (Wizard)
  python main.py config show              Konfiguration anzeigen
  python main.py menu                     Interaktives Menü
  python main.py rooms [--free-only]      Zimmerübersicht
  python main.py students                 Alle Bewohner
  python main.py book <name> <nr> <id>    Zimmer buchen
  python main.py vacate <nr>              Zimmer räumen
  python main.py search <name>            Zimmer nach Bewohnername suchen
  python main.py check                    Konsistenzprüfung der Belegung
  python main.py export-rooms [datei]     Zimmerstatus-Bericht schreiben
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

console = Console()


def _configure_logging(level: str) -> None:
    """Log-Ausgabe über Rich auf stderr."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config_or_abort():
    """Lädt die Konfiguration (ohne Datei: Standardwerte) oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr, mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def _open_hostel(data_file: Optional[str] = None):
    """Konfiguration laden, Hostel anlegen und Belegungsliste einlesen."""
    from models.hostel import Hostel

    mgr, config = _load_config_or_abort()
    ctx = click.get_current_context()
    verbose = (ctx.find_root().params or {}).get("verbose", False)
    _configure_logging("DEBUG" if verbose else config.logging.level)

    hostel = Hostel(
        num_rooms=config.num_rooms,
        data_file=data_file or config.storage.data_file,
    )
    result = hostel.load_data_from_file()
    if result.warnings or not result.file_found:
        result.print_rich()
    return config, hostel


def _save_or_abort(hostel) -> None:
    result = hostel.save_data_to_file()
    if not result.success:
        result.print_rich()
        sys.exit(1)


data_file_option = click.option(
    "--data-file", default=None,
    help="Belegungsliste (überschreibt storage.data_file aus der Config).",
)


# ─── SETUP ────────────────────────────────────────────────────────────────────

@click.command("setup")
def cmd_setup():
    """Ersteinrichtung: Wohnheim-Konfiguration mit dem Setup-Wizard anlegen."""
    from config.wizard import run_wizard
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check():
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            f"Datei: {mgr.DEFAULT_CONFIG}"
        )
        if not click.confirm("Trotzdem neu einrichten?", default=False):
            return

    config = run_wizard()
    if config is not None:
        mgr.save(config)
        console.print("[bold green]Einrichtung abgeschlossen![/bold green]")
        console.print("Starten Sie jetzt [bold]python main.py menu[/bold].")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen."""


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    from config.wizard import show_config_table

    mgr, config = _load_config_or_abort()
    if mgr.first_run_check():
        console.print("[dim]Keine Konfigurationsdatei, es gelten die Standardwerte.[/dim]")
    console.print(Panel(
        f"[bold]{escape(config.hostel_name)}[/bold]  |  {config.num_rooms} Zimmer",
        title="Wohnheim-Konfiguration",
        border_style="cyan",
    ))
    show_config_table(config)


# ─── MENÜ ─────────────────────────────────────────────────────────────────────

@click.command("menu")
@data_file_option
def cmd_menu(data_file: Optional[str]):
    """Interaktives Menü; Beenden speichert die Belegungsliste."""
    from export.tui_menu import HostelMenu

    config, hostel = _open_hostel(data_file)
    HostelMenu(hostel, console=console, title=escape(config.hostel_name)).run()


# ─── ANZEIGE ──────────────────────────────────────────────────────────────────

@click.command("rooms")
@click.option("--free-only", is_flag=True, default=False,
              help="Nur freie Zimmer anzeigen.")
@data_file_option
def cmd_rooms(free_only: bool, data_file: Optional[str]):
    """Zeigt freie und belegte Zimmer."""
    from export.tui_renderer import rooms_table

    _, hostel = _open_hostel(data_file)
    console.print(rooms_table(hostel, include_occupied=not free_only))


@click.command("students")
@data_file_option
def cmd_students(data_file: Optional[str]):
    """Zeigt alle Bewohner in Buchungsreihenfolge."""
    from export.tui_renderer import students_table

    _, hostel = _open_hostel(data_file)
    console.print(students_table(hostel))


# ─── BUCHEN / RÄUMEN / SUCHEN ─────────────────────────────────────────────────

@click.command("book")
@click.argument("name")
@click.argument("roll_number", type=int)
@click.argument("room_id", type=int)
@data_file_option
def cmd_book(name: str, roll_number: int, room_id: int, data_file: Optional[str]):
    """Bucht ein freies Zimmer und speichert die Belegungsliste."""
    _, hostel = _open_hostel(data_file)
    result = hostel.book_room(name, roll_number, room_id)
    result.print_rich()
    if not result.success:
        sys.exit(1)
    _save_or_abort(hostel)


@click.command("vacate")
@click.argument("roll_number", type=int)
@data_file_option
def cmd_vacate(roll_number: int, data_file: Optional[str]):
    """Räumt das Zimmer eines Bewohners und speichert die Belegungsliste."""
    _, hostel = _open_hostel(data_file)
    result = hostel.vacate_room(roll_number)
    result.print_rich()
    if not result.success:
        sys.exit(1)
    _save_or_abort(hostel)


@click.command("search")
@click.argument("name")
@data_file_option
def cmd_search(name: str, data_file: Optional[str]):
    """Sucht das Zimmer eines Bewohners (exakter Name)."""
    _, hostel = _open_hostel(data_file)
    result = hostel.search_room_by_student_name(name)
    result.print_rich()
    sys.exit(0 if result.success else 1)


# ─── PRÜFUNG / EXPORT ─────────────────────────────────────────────────────────

@click.command("check")
@data_file_option
def cmd_check(data_file: Optional[str]):
    """Prüft die Zuordnung Bewohner ↔ belegte Zimmer."""
    from analysis.consistency import check_consistency

    _, hostel = _open_hostel(data_file)
    report = check_consistency(hostel)
    report.print_rich()
    sys.exit(0 if report.is_consistent else 1)


@click.command("export-rooms")
@click.argument("output", required=False, type=click.Path(path_type=Path))
@data_file_option
def cmd_export_rooms(output: Optional[Path], data_file: Optional[str]):
    """Schreibt den Zimmerstatus (<id> <Available|Occupied>) in eine Datei."""
    from export.room_report import RoomReportExporter

    config, hostel = _open_hostel(data_file)
    target = output or Path(config.storage.room_report_file)
    try:
        path = RoomReportExporter(hostel).export(target)
    except OSError as e:
        console.print(f"[red]Bericht konnte nicht geschrieben werden: {escape(str(e))}[/red]")
        sys.exit(1)
    console.print(f"[green]✓[/green] Zimmerbericht gespeichert: {path}")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Log-Ausgabe (DEBUG).")
def cli(verbose: bool):
    """Wohnheim-Zimmerverwaltung: Zimmer buchen, räumen und suchen.

    Ohne Argumente startet das interaktive Menü.
    """


def main():
    """Einstiegspunkt. Ohne Argumente wird das interaktive Menü gestartet."""
    from config.manager import ConfigManager
    mgr = ConfigManager()

    if len(sys.argv) == 1:
        if mgr.first_run_check():
            console.print(Panel(
                "[bold]Willkommen bei der Wohnheim-Zimmerverwaltung![/bold]\n\n"
                "Keine Konfiguration gefunden, es gelten die Standardwerte.\n"
                "Eigene Einstellungen: [bold]python main.py setup[/bold]",
                border_style="cyan",
            ))
        sys.argv.append("menu")

    cli()


# Befehle registrieren
cli.add_command(cmd_setup)
cli.add_command(cmd_config)
cli.add_command(cmd_menu)
cli.add_command(cmd_rooms)
cli.add_command(cmd_students)
cli.add_command(cmd_book)
cli.add_command(cmd_vacate)
cli.add_command(cmd_search)
cli.add_command(cmd_check)
cli.add_command(cmd_export_rooms)


if __name__ == "__main__":
    main()
