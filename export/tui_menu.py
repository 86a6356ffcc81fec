"""Interaktives Textmenü der Zimmerverwaltung.

Startet mit: python main.py menu (oder python main.py ohne Argumente)
Beenden (6) speichert die Belegungsliste vor dem Verlassen.
"""

from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt

from export.tui_renderer import rooms_table, students_table
from models.hostel import Hostel

MENU_ITEMS = [
    ("1", "Zimmerübersicht anzeigen"),
    ("2", "Alle Bewohner und Zimmer anzeigen"),
    ("3", "Zimmer buchen"),
    ("4", "Zimmer räumen"),
    ("5", "Zimmer nach Bewohnername suchen"),
    ("6", "Beenden"),
]


class HostelMenu:
    """Menüschleife über einem geladenen Hostel."""

    def __init__(self, hostel: Hostel, console: Console | None = None,
                 title: str = "Wohnheim-Zimmerverwaltung") -> None:
        self.hostel = hostel
        self.console = console or Console()
        self.title = title

    def _print_menu(self) -> None:
        self.console.print()
        self.console.print(Panel(
            "\n".join(f"  [bold]{key}.[/bold] {label}" for key, label in MENU_ITEMS),
            title=f"[bold cyan]{self.title}[/bold cyan]",
            border_style="cyan",
        ))

    def run(self) -> None:
        """Läuft bis Beenden gewählt wird; speichert dann die Belegungsliste."""
        try:
            while True:
                self._print_menu()
                choice = Prompt.ask("Auswahl (1-6)", console=self.console)
                if choice == "6":
                    break
                self.handle(choice)
        except (KeyboardInterrupt, EOFError):
            self.console.print("\n[yellow]Abgebrochen.[/yellow]")
        self.hostel.save_data_to_file().print_rich()

    def handle(self, choice: str) -> None:
        if choice == "1":
            self.console.print(rooms_table(self.hostel))
        elif choice == "2":
            self.console.print(students_table(self.hostel))
            self.console.print(rooms_table(self.hostel))
        elif choice == "3":
            name = Prompt.ask("Name", console=self.console)
            roll = IntPrompt.ask("Matrikelnummer", console=self.console)
            room_id = IntPrompt.ask("Zimmer-ID", console=self.console)
            self.hostel.book_room(name, roll, room_id).print_rich()
        elif choice == "4":
            roll = IntPrompt.ask("Matrikelnummer des Bewohners", console=self.console)
            self.hostel.vacate_room(roll).print_rich()
        elif choice == "5":
            name = Prompt.ask("Name des Bewohners", console=self.console)
            self.hostel.search_room_by_student_name(name).print_rich()
        else:
            self.console.print("[yellow]Ungültige Auswahl. Bitte eine Zahl von 1 bis 6 eingeben.[/yellow]")
