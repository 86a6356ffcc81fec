"""Hostel: Zimmerbestand + Belegungsliste und deren Persistenz.

Der Zimmerbestand wird einmalig beim Erzeugen angelegt (IDs 1..N) und ist
danach fest. Bewohner entstehen nur durch eine erfolgreiche Buchung (oder
beim Laden) und verschwinden nur durch ein erfolgreiches Räumen.

Invariante: Jeder Bewohner der Belegungsliste verweist auf ein belegtes
Zimmer, und jedes belegte Zimmer wird von genau einem Bewohner referenziert.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from data.roster_codec import (
    RosterFormatError,
    decode_line,
    is_persistable_name,
    parse_line,
    read_roster_lines,
    write_roster,
)
from models.results import ErrorKind, LoadResult, OperationResult, SearchResult
from models.room import Room
from models.student import Student

if TYPE_CHECKING:
    from config.schema import HostelConfig

logger = logging.getLogger(__name__)


class Hostel:
    """Verwaltet alle Zimmer und Bewohner eines Wohnheims."""

    def __init__(self, num_rooms: int, data_file: Union[str, Path]) -> None:
        if num_rooms < 1:
            raise ValueError(f"num_rooms muss ≥ 1 sein, nicht {num_rooms}")
        # ID → Zimmer; die ID ist unabhängig von der Speicherposition
        self.rooms: dict[int, Room] = {i: Room(id=i) for i in range(1, num_rooms + 1)}
        self.students: list[Student] = []
        self.data_file = Path(data_file)

    @classmethod
    def from_config(cls, config: "HostelConfig") -> "Hostel":
        return cls(num_rooms=config.num_rooms, data_file=config.data_file)

    # ─── Übersicht ───

    @property
    def num_rooms(self) -> int:
        return len(self.rooms)

    def get_room(self, room_id: int) -> Optional[Room]:
        return self.rooms.get(room_id)

    def find_student(self, roll_number: int) -> Optional[Student]:
        """Erster Bewohner mit dieser Matrikelnummer (Reihenfolge der Belegungsliste)."""
        return next((s for s in self.students if s.roll_number == roll_number), None)

    def available_rooms(self) -> list[Room]:
        return [r for r in self.rooms.values() if r.available]

    def occupied_rooms(self) -> list[Room]:
        return [r for r in self.rooms.values() if not r.available]

    def occupancy_summary(self) -> dict[str, int]:
        """Anzahl Zimmer gesamt / frei / belegt."""
        free = len(self.available_rooms())
        return {
            "total": self.num_rooms,
            "free": free,
            "occupied": self.num_rooms - free,
        }

    def display_rooms(self) -> str:
        """Erst alle freien, dann alle belegten Zimmer, jeweils nach ID sortiert."""
        lines = ["Freie Zimmer:"]
        lines += [r.display() for r in self.available_rooms()]
        lines.append("Belegte Zimmer:")
        lines += [r.display() for r in self.occupied_rooms()]
        return "\n".join(lines)

    def display_students(self) -> str:
        lines = ["Alle Bewohner:"]
        lines += [s.display() for s in self.students]
        return "\n".join(lines)

    # ─── Buchen / Räumen / Suchen ───

    def book_room(self, name: str, roll_number: int, room_id: int) -> OperationResult:
        """Bucht ein freies Zimmer für einen neuen Bewohner.

        Eine bereits vergebene Matrikelnummer wird NICHT abgewiesen; es entsteht
        ein zweiter, unabhängiger Eintrag.
        """
        if not is_persistable_name(name):
            return OperationResult.fail(
                ErrorKind.INVALID_NAME,
                f"Ungültiger Name {name!r}: Name darf nicht leer sein und keine Leerzeichen enthalten.",
            )

        room = self.rooms.get(room_id)
        if room is None or not room.available:
            logger.debug(f"Buchung abgelehnt: Zimmer {room_id} nicht frei oder nicht vorhanden")
            return OperationResult.fail(
                ErrorKind.ROOM_UNAVAILABLE_OR_NOT_FOUND,
                f"Zimmer {room_id} ist entweder nicht frei oder existiert nicht.",
            )

        student = Student(name=name, roll_number=roll_number)
        self.students.append(student)
        student.assign_room(room)
        logger.debug(f"Zimmer {room_id} gebucht für {name} ({roll_number})")
        return OperationResult.ok(f"Zimmer {room_id} erfolgreich für {name} gebucht.")

    def vacate_room(self, roll_number: int) -> OperationResult:
        """Räumt das Zimmer des ersten Bewohners mit dieser Matrikelnummer und entfernt ihn."""
        for i, student in enumerate(self.students):
            if student.roll_number == roll_number:
                student.vacate_room(self.rooms)
                del self.students[i]
                logger.debug(f"Zimmer geräumt für Matrikelnr. {roll_number}")
                return OperationResult.ok(
                    f"Zimmer für Matrikelnr. {roll_number} erfolgreich geräumt."
                )

        return OperationResult.fail(
            ErrorKind.STUDENT_NOT_FOUND,
            f"Bewohner mit Matrikelnr. {roll_number} nicht gefunden.",
        )

    def search_room_by_student_name(self, name: str) -> SearchResult:
        """Sucht den ersten Bewohner mit exakt diesem Namen (Groß-/Kleinschreibung zählt)."""
        student = next((s for s in self.students if s.name == name), None)
        if student is None:
            return SearchResult.fail(
                ErrorKind.STUDENT_NOT_FOUND,
                f"Bewohner mit Namen '{name}' nicht gefunden.",
            )
        return SearchResult.ok("Bewohner gefunden", student=student)

    # ─── Persistenz ────────────────────────────────────────────────────────

    def load_data_from_file(self) -> LoadResult:
        """Lädt die Belegungsliste beim Start.

        Fehlt die Datei (oder ist sie nicht lesbar), startet das Hostel ohne
        Buchungen. Zeilen mit "NA" werden übersprungen. Beschädigte Zeilen (auch
        solche ohne gültiges UTF-8) und Zeilen, die die Invariante verletzen
        würden, werden mit Warnung übersprungen.
        """
        try:
            lines = read_roster_lines(self.data_file)
        except FileNotFoundError:
            logger.info(f"Keine Datendatei gefunden: {self.data_file}")
            return LoadResult.ok(
                "Keine Datendatei gefunden. Start ohne Buchungen.",
                file_found=False,
            )
        except OSError as e:
            logger.warning(f"Datendatei nicht lesbar: {self.data_file} ({e})")
            return LoadResult.ok(
                "Datendatei nicht lesbar. Start ohne Buchungen.",
                file_found=False,
                warnings=[str(e)],
            )

        loaded = 0
        skipped = 0
        warnings: list[str] = []
        for line_no, raw in enumerate(lines, start=1):
            try:
                record = parse_line(decode_line(raw))
            except RosterFormatError as e:
                warnings.append(f"Zeile {line_no}: {e}")
                skipped += 1
                continue
            if record is None:
                continue
            if record.room_id is None:
                skipped += 1
                continue

            room = self.rooms.get(record.room_id)
            if room is None:
                warnings.append(f"Zeile {line_no}: Zimmer {record.room_id} existiert nicht.")
                skipped += 1
                continue
            if not room.available:
                warnings.append(f"Zeile {line_no}: Zimmer {record.room_id} ist bereits belegt.")
                skipped += 1
                continue

            student = Student(name=record.name, roll_number=record.roll_number)
            student.assign_room(room)
            self.students.append(student)
            loaded += 1

        for w in warnings:
            logger.warning(f"{self.data_file}: {w}")
        logger.info(f"{loaded} Bewohner aus {self.data_file} geladen ({skipped} übersprungen)")
        return LoadResult.ok(
            f"Daten erfolgreich aus {self.data_file} geladen ({loaded} Bewohner).",
            file_found=True,
            loaded=loaded,
            skipped=skipped,
            warnings=warnings,
        )

    def save_data_to_file(self) -> OperationResult:
        """Schreibt die komplette Belegungsliste neu. Zimmer selbst werden nicht gespeichert."""
        try:
            count = write_roster(self.data_file, self.students)
        except OSError as e:
            logger.warning(f"Speichern fehlgeschlagen: {self.data_file} ({e})")
            return OperationResult.fail(
                ErrorKind.PERSISTENCE_UNAVAILABLE,
                f"Fehler beim Speichern der Daten in {self.data_file}: {e}",
            )
        logger.info(f"{count} Bewohner in {self.data_file} gespeichert")
        return OperationResult.ok(f"Daten erfolgreich in {self.data_file} gespeichert.")
