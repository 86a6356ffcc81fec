"""Ergebnisobjekte der Hostel-Operationen (Pydantic v2).

Alle Fehlerfälle der Belegungsverwaltung werden als Rückgabewert gemeldet,
nie als Ausnahme. Die Präsentationsschicht entscheidet über die Ausgabe.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from models.student import Student


class ErrorKind(str, Enum):
    ROOM_UNAVAILABLE_OR_NOT_FOUND = "room_unavailable_or_not_found"
    STUDENT_NOT_FOUND = "student_not_found"
    PERSISTENCE_UNAVAILABLE = "persistence_unavailable"
    INVALID_NAME = "invalid_name"


class OperationResult(BaseModel):
    """Ergebnis einer Operation: Erfolg/Misserfolg plus Meldungstext."""

    success: bool
    message: str
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, message: str, **kwargs) -> "OperationResult":
        return cls(success=True, message=message, **kwargs)

    @classmethod
    def fail(cls, error: ErrorKind, message: str, **kwargs) -> "OperationResult":
        return cls(success=False, message=message, error=error, **kwargs)

    def print_rich(self) -> None:
        """Gibt die Meldung farbig über Rich aus."""
        from rich.console import Console
        from rich.markup import escape

        console = Console()
        if self.success:
            console.print(f"[green]✓[/green] {escape(self.message)}")
        else:
            console.print(f"[red]✗ {escape(self.message)}[/red]")


class SearchResult(OperationResult):
    """Ergebnis der Namenssuche. student ist nur bei Erfolg gesetzt."""

    student: Optional[Student] = None

    def print_rich(self) -> None:
        from rich.console import Console
        from rich.markup import escape
        from rich.panel import Panel

        if self.student is None:
            super().print_rich()
            return
        Console().print(Panel(
            escape(self.student.display()),
            title=self.message,
            border_style="cyan",
        ))


class LoadResult(OperationResult):
    """Ergebnis des Ladens der Belegungsdatei."""

    file_found: bool = False
    loaded: int = 0
    skipped: int = 0
    warnings: list[str] = []   # Übersprungene Zeilen mit Grund

    def print_rich(self) -> None:
        from rich.console import Console
        from rich.markup import escape

        console = Console()
        super().print_rich()
        for w in self.warnings:
            console.print(f"  [yellow]• {escape(w)}[/yellow]")
