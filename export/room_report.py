"""Zimmerstatus-Bericht als Textdatei.

Eine Zeile pro Zimmer in ID-Reihenfolge:

    <zimmer_id> <Available|Occupied>

Der Bericht ist reine Ausgabe; beim Start wird der Zimmerbestand
ausschließlich aus der Belegungsliste rekonstruiert.
"""

from pathlib import Path

from models.hostel import Hostel
from models.room import Room

STATUS_AVAILABLE = "Available"
STATUS_OCCUPIED = "Occupied"


def format_room_line(room: Room) -> str:
    status = STATUS_AVAILABLE if room.available else STATUS_OCCUPIED
    return f"{room.id} {status}"


class RoomReportExporter:
    """Schreibt den Zimmerstatus eines Hostels in eine Textdatei."""

    def __init__(self, hostel: Hostel) -> None:
        self.hostel = hostel

    def lines(self) -> list[str]:
        return [format_room_line(r) for r in sorted(self.hostel.rooms.values(), key=lambda r: r.id)]

    def export(self, path: Path) -> Path:
        """Schreibt den Bericht und gibt den Pfad zurück.

        Raises:
            OSError: Datei kann nicht geschrieben werden.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for line in self.lines():
                f.write(line + "\n")
        return path
