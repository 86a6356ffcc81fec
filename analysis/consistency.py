"""Konsistenzprüfung des Hostel-Zustands.

Prüft die Zuordnung Bewohner ↔ belegte Zimmer als Sicherheitsnetz
unabhängig von den Buchungsoperationen.
"""

from collections import defaultdict
from typing import Literal

from pydantic import BaseModel

from data.roster_codec import is_persistable_name
from models.hostel import Hostel


class ConsistencyViolation(BaseModel):
    """Eine einzelne Verletzung."""

    severity: Literal["error", "warning"]
    check: str           # z.B. "room_double_assignment"
    description: str
    entity: str          # "Zimmer 3" / "Matrikelnr. 17"


class ConsistencyReport(BaseModel):
    """Ergebnis der Konsistenzprüfung."""

    violations: list[ConsistencyViolation]
    is_consistent: bool  # True wenn keine Errors (Warnings ok)

    @property
    def errors(self) -> list[ConsistencyViolation]:
        return [v for v in self.violations if v.severity == "error"]

    @property
    def warnings(self) -> list[ConsistencyViolation]:
        return [v for v in self.violations if v.severity == "warning"]

    def print_rich(self) -> None:
        """Gibt den Report formatiert über Rich aus."""
        from rich.console import Console
        from rich.markup import escape
        from rich.panel import Panel
        from rich.table import Table
        from rich import box

        console = Console()
        status = (
            "[bold green]✓ KONSISTENT[/bold green]"
            if self.is_consistent
            else "[bold red]✗ INKONSISTENT[/bold red]"
        )
        lines = [status, f"Fehler: {len(self.errors)} | Warnungen: {len(self.warnings)}"]
        console.print(Panel("\n".join(lines), title="Konsistenzprüfung", border_style="cyan"))

        if not self.violations:
            console.print("[dim]Keine Verletzungen gefunden.[/dim]")
            return

        table = Table(box=box.ROUNDED, show_lines=True)
        table.add_column("Typ", width=8)
        table.add_column("Prüfung", width=28)
        table.add_column("Entität", width=16)
        table.add_column("Beschreibung")
        for v in self.violations:
            color = "red" if v.severity == "error" else "yellow"
            table.add_row(
                f"[{color}]{v.severity.upper()}[/{color}]",
                v.check,
                escape(v.entity),
                escape(v.description),
            )
        console.print(table)


class ConsistencyChecker:
    """Prüft einen Hostel auf Verletzungen der Bewohner↔Zimmer-Zuordnung."""

    def check(self, hostel: Hostel) -> ConsistencyReport:
        violations: list[ConsistencyViolation] = []

        violations.extend(self._check_room_references(hostel))
        violations.extend(self._check_occupied_rooms(hostel))
        violations.extend(self._check_duplicate_roll_numbers(hostel))
        violations.extend(self._check_persistable_names(hostel))

        has_errors = any(v.severity == "error" for v in violations)
        return ConsistencyReport(violations=violations, is_consistent=not has_errors)

    # ── Einzelne Prüfungen ────────────────────────────────────────────────────

    def _check_room_references(self, hostel: Hostel) -> list[ConsistencyViolation]:
        """Jeder Bewohner verweist auf genau ein existierendes, belegtes Zimmer."""
        violations: list[ConsistencyViolation] = []
        holders: dict[int, list[int]] = defaultdict(list)

        for s in hostel.students:
            entity = f"Matrikelnr. {s.roll_number}"
            if s.room_id is None:
                violations.append(ConsistencyViolation(
                    severity="error",
                    check="student_without_room",
                    description=f"{s.name} steht ohne Zimmer in der Belegungsliste.",
                    entity=entity,
                ))
                continue
            room = hostel.get_room(s.room_id)
            if room is None:
                violations.append(ConsistencyViolation(
                    severity="error",
                    check="unknown_room",
                    description=f"{s.name} verweist auf nicht existierendes Zimmer {s.room_id}.",
                    entity=entity,
                ))
                continue
            if room.available:
                violations.append(ConsistencyViolation(
                    severity="error",
                    check="room_marked_free",
                    description=f"Zimmer {room.id} ist {s.name} zugewiesen, aber als frei markiert.",
                    entity=f"Zimmer {room.id}",
                ))
            holders[room.id].append(s.roll_number)

        for room_id, rolls in sorted(holders.items()):
            if len(rolls) > 1:
                violations.append(ConsistencyViolation(
                    severity="error",
                    check="room_double_assignment",
                    description=f"Zimmer {room_id} ist {len(rolls)} Bewohnern zugewiesen "
                                f"(Matrikelnr. {', '.join(str(r) for r in rolls)}).",
                    entity=f"Zimmer {room_id}",
                ))
        return violations

    def _check_occupied_rooms(self, hostel: Hostel) -> list[ConsistencyViolation]:
        """Jedes belegte Zimmer wird von mindestens einem Bewohner referenziert."""
        referenced = {s.room_id for s in hostel.students if s.room_id is not None}
        return [
            ConsistencyViolation(
                severity="error",
                check="orphaned_occupied_room",
                description=f"Zimmer {room.id} ist belegt, aber keinem Bewohner zugewiesen.",
                entity=f"Zimmer {room.id}",
            )
            for room in hostel.occupied_rooms()
            if room.id not in referenced
        ]

    def _check_duplicate_roll_numbers(self, hostel: Hostel) -> list[ConsistencyViolation]:
        """Doppelte Matrikelnummern sind erlaubt, aber Räumen trifft nur den ersten Eintrag."""
        by_roll: dict[int, list[str]] = defaultdict(list)
        for s in hostel.students:
            by_roll[s.roll_number].append(s.name)
        return [
            ConsistencyViolation(
                severity="warning",
                check="duplicate_roll_number",
                description=f"Matrikelnr. {roll} ist {len(names)}× vergeben "
                            f"({', '.join(names)}); Räumen betrifft nur den ersten Eintrag.",
                entity=f"Matrikelnr. {roll}",
            )
            for roll, names in sorted(by_roll.items())
            if len(names) > 1
        ]

    def _check_persistable_names(self, hostel: Hostel) -> list[ConsistencyViolation]:
        return [
            ConsistencyViolation(
                severity="warning",
                check="name_not_persistable",
                description=f"Name {s.name!r} enthält Leerzeichen und geht beim Speichern verloren.",
                entity=f"Matrikelnr. {s.roll_number}",
            )
            for s in hostel.students
            if not is_persistable_name(s.name)
        ]


def check_consistency(hostel: Hostel) -> ConsistencyReport:
    return ConsistencyChecker().check(hostel)
