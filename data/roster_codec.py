"""Zeilenformat der Belegungsdatei (Lesen und Schreiben).

Eine Zeile pro Bewohner:

    <name> <matrikelnummer> <zimmer_id|NA>

Felder sind durch einzelne Leerzeichen getrennt. Namen dürfen deshalb keine
Leerzeichen enthalten: beim Lesen wird an Whitespace getrennt, ein Name
mit Leerzeichen ließe sich nicht wiederherstellen. ``NA`` steht für
"kein Zimmer zugewiesen".
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from models.student import Student

NA_TOKEN = "NA"


class RosterFormatError(Exception):
    """Zeile der Belegungsdatei lässt sich nicht lesen."""


@dataclass(frozen=True)
class RosterRecord:
    """Eine gelesene oder zu schreibende Zeile der Belegungsdatei."""

    name: str
    roll_number: int
    room_id: Optional[int]   # None ⇔ "NA"


def is_persistable_name(name: str) -> bool:
    """True wenn der Name verlustfrei im Zeilenformat gespeichert werden kann."""
    return bool(name) and not any(ch.isspace() for ch in name)


def parse_line(line: str) -> Optional[RosterRecord]:
    """Parst eine Zeile. Leerzeilen → None.

    Raises:
        RosterFormatError: Falsche Feldanzahl oder nicht-numerische Werte.
    """
    fields = line.split()
    if not fields:
        return None
    if len(fields) != 3:
        raise RosterFormatError(
            f"3 Felder erwartet (Name, Matrikelnr., Zimmer), {len(fields)} gefunden: {line.strip()!r}"
        )
    name, raw_roll, raw_room = fields
    try:
        roll_number = int(raw_roll)
    except ValueError:
        raise RosterFormatError(f"Ungültige Matrikelnummer: {raw_roll!r}")

    if raw_room == NA_TOKEN:
        return RosterRecord(name=name, roll_number=roll_number, room_id=None)
    try:
        room_id = int(raw_room)
    except ValueError:
        raise RosterFormatError(f"Ungültige Zimmer-ID: {raw_room!r}")
    return RosterRecord(name=name, roll_number=roll_number, room_id=room_id)


def format_record(record: RosterRecord) -> str:
    """Gegenstück zu parse_line (ohne Zeilenumbruch)."""
    room = str(record.room_id) if record.room_id is not None else NA_TOKEN
    return f"{record.name} {record.roll_number} {room}"


def encode_student(student: "Student") -> str:
    return format_record(RosterRecord(
        name=student.name,
        roll_number=student.roll_number,
        room_id=student.room_id,
    ))


def decode_line(raw: bytes) -> str:
    """Dekodiert eine Rohzeile als UTF-8.

    Raises:
        RosterFormatError: Zeile ist kein gültiges UTF-8 (z.B. Latin-1-Umlaute).
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RosterFormatError(
            f"Kein gültiges UTF-8 (Byte 0x{raw[e.start]:02x} an Position {e.start})"
        )


def read_roster_lines(path: Path) -> list[bytes]:
    """Liest alle Zeilen der Belegungsdatei als Bytes.

    Dekodiert wird zeilenweise (decode_line), damit eine fremdkodierte Zeile
    nicht die ganze Datei unlesbar macht.

    Raises:
        FileNotFoundError: Datei existiert nicht.
        OSError: Datei kann nicht gelesen werden.
    """
    with open(path, "rb") as f:
        return f.read().splitlines()


def write_roster(path: Path, students: Iterable["Student"]) -> int:
    """Schreibt die Datei komplett neu (truncate + rewrite). Gibt die Zeilenzahl zurück.

    Raises:
        OSError: Datei kann nicht geschrieben werden.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for student in students:
            f.write(encode_student(student) + "\n")
            count += 1
    return count
