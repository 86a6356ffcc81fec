"""Gemeinsamer Renderer für die Terminal-Anzeige von Zimmern und Bewohnern.

Wird von den CLI-Befehlen (rooms, students) und vom interaktiven Menü verwendet.
"""

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich import box

if TYPE_CHECKING:
    from models.hostel import Hostel


def render_room_rows(hostel: "Hostel", include_occupied: bool = True) -> list[list[str]]:
    """Gibt Tabellenzeilen für den Zimmerstatus zurück.

    Jede Zeile: [zimmer_id, status, bewohner]
    Erst alle freien, dann alle belegten Zimmer, jeweils nach ID sortiert.
    """
    holder = {s.room_id: s for s in hostel.students if s.room_id is not None}
    rows: list[list[str]] = []
    for room in hostel.available_rooms():
        rows.append([str(room.id), room.status_label, "—"])
    if include_occupied:
        for room in hostel.occupied_rooms():
            student = holder.get(room.id)
            who = f"{student.name} ({student.roll_number})" if student else "?"
            rows.append([str(room.id), room.status_label, who])
    return rows


def render_student_rows(hostel: "Hostel") -> list[list[str]]:
    """Jede Zeile: [name, matrikelnr, zimmer_id | "Nicht zugewiesen"]."""
    return [
        [
            s.name,
            str(s.roll_number),
            str(s.room_id) if s.room_id is not None else "Nicht zugewiesen",
        ]
        for s in hostel.students
    ]


def rooms_table(hostel: "Hostel", include_occupied: bool = True) -> Table:
    summary = hostel.occupancy_summary()
    table = Table(
        title=f"Zimmer ({summary['free']} frei / {summary['occupied']} belegt)",
        box=box.ROUNDED,
    )
    table.add_column("Zimmer", style="bold", justify="right")
    table.add_column("Status")
    table.add_column("Bewohner")
    for room_id, status, who in render_room_rows(hostel, include_occupied):
        color = "green" if status == "Frei" else "red"
        table.add_row(room_id, f"[{color}]{status}[/{color}]", escape(who))
    return table


def students_table(hostel: "Hostel") -> Table:
    table = Table(title=f"Bewohner ({len(hostel.students)})", box=box.ROUNDED)
    table.add_column("Name", style="bold")
    table.add_column("Matrikelnr.", justify="right")
    table.add_column("Zimmer", justify="right")
    for name, roll, room in render_student_rows(hostel):
        table.add_row(escape(name), roll, room)
    return table
