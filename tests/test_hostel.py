"""Tests für Zimmer, Bewohner und die Belegungsoperationen des Hostels."""

import pytest
from pydantic import ValidationError

from models.hostel import Hostel
from models.results import ErrorKind, OperationResult, SearchResult
from models.room import Room
from models.student import Student


# ─── Hilfsfunktionen ──────────────────────────────────────────────────────────

def _make_hostel(tmp_path, num_rooms: int = 3) -> Hostel:
    return Hostel(num_rooms=num_rooms, data_file=tmp_path / "hostel_data.txt")


def _snapshot(hostel: Hostel) -> tuple:
    rooms = tuple((r.id, r.available) for r in hostel.rooms.values())
    students = tuple((s.name, s.roll_number, s.room_id) for s in hostel.students)
    return rooms, students


def _assert_bijection(hostel: Hostel) -> None:
    """Belegte Zimmer ↔ zugewiesene Zimmer der Bewohner: eins zu eins."""
    occupied = {r.id for r in hostel.occupied_rooms()}
    assigned = [s.room_id for s in hostel.students]
    assert None not in assigned
    assert len(assigned) == len(set(assigned))
    assert set(assigned) == occupied


# ─── ZIMMER ───────────────────────────────────────────────────────────────────

class TestRoom:
    def test_new_room_is_available(self):
        """Neues Zimmer ist frei."""
        r = Room(id=1)
        assert r.available
        assert r.status_label == "Frei"

    def test_book_and_free(self):
        """book() belegt, free() gibt frei."""
        r = Room(id=2)
        r.book()
        assert not r.available
        r.free()
        assert r.available

    def test_book_is_idempotent(self):
        r = Room(id=2)
        r.book()
        r.book()
        assert not r.available

    def test_display(self):
        r = Room(id=7)
        assert r.display() == "Zimmer-ID: 7 | Status: Frei"
        r.book()
        assert r.display() == "Zimmer-ID: 7 | Status: Belegt"

    def test_invalid_id_raises(self):
        """Zimmer-IDs sind positiv."""
        with pytest.raises(ValidationError):
            Room(id=0)


# ─── BEWOHNER ─────────────────────────────────────────────────────────────────

class TestStudent:
    def test_assign_room_books_room(self):
        """assign_room speichert die ID und belegt das Zimmer."""
        room = Room(id=4)
        s = Student(name="Alice", roll_number=1)
        assert not s.has_room
        s.assign_room(room)
        assert s.room_id == 4
        assert not room.available

    def test_vacate_room_frees_room(self):
        room = Room(id=4)
        rooms = {4: room}
        s = Student(name="Alice", roll_number=1)
        s.assign_room(room)
        s.vacate_room(rooms)
        assert s.room_id is None
        assert room.available

    def test_vacate_without_room_is_noop(self):
        """Ohne Zimmer: vacate_room ändert nichts."""
        room = Room(id=1)
        s = Student(name="Bob", roll_number=2)
        s.vacate_room({1: room})
        assert s.room_id is None
        assert room.available

    def test_display_assigned(self):
        s = Student(name="Alice", roll_number=1, room_id=2)
        assert s.display() == "Name: Alice | Matrikelnr.: 1 | Zimmer-ID: 2"

    def test_display_not_assigned(self):
        s = Student(name="Alice", roll_number=1)
        assert "Nicht zugewiesen" in s.display()

    def test_empty_name_raises(self):
        with pytest.raises(ValidationError):
            Student(name="", roll_number=1)


# ─── HOSTEL: AUFBAU / ANZEIGE ─────────────────────────────────────────────────

class TestHostelSetup:
    def test_rooms_created_available(self, tmp_path):
        """Alle Zimmer 1..N existieren und sind frei."""
        hostel = _make_hostel(tmp_path, num_rooms=5)
        assert hostel.num_rooms == 5
        assert list(hostel.rooms) == [1, 2, 3, 4, 5]
        assert all(r.available for r in hostel.rooms.values())
        assert hostel.students == []

    def test_zero_rooms_raises(self, tmp_path):
        with pytest.raises(ValueError):
            Hostel(num_rooms=0, data_file=tmp_path / "x.txt")

    def test_from_config(self, tmp_path):
        from config.schema import HostelConfig, StorageConfig
        config = HostelConfig(
            num_rooms=7,
            storage=StorageConfig(data_file=str(tmp_path / "d.txt")),
        )
        hostel = Hostel.from_config(config)
        assert hostel.num_rooms == 7
        assert hostel.data_file == tmp_path / "d.txt"

    def test_get_room(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        assert hostel.get_room(2).id == 2
        assert hostel.get_room(99) is None

    def test_display_rooms_available_first(self, tmp_path):
        """Freie Zimmer zuerst, dann belegte, jeweils nach ID sortiert."""
        hostel = _make_hostel(tmp_path, num_rooms=4)
        hostel.book_room("Alice", 1, 3)
        hostel.book_room("Bob", 2, 1)
        assert hostel.display_rooms().splitlines() == [
            "Freie Zimmer:",
            "Zimmer-ID: 2 | Status: Frei",
            "Zimmer-ID: 4 | Status: Frei",
            "Belegte Zimmer:",
            "Zimmer-ID: 1 | Status: Belegt",
            "Zimmer-ID: 3 | Status: Belegt",
        ]

    def test_display_students_in_booking_order(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Carol", 3, 2)
        hostel.book_room("Alice", 1, 1)
        lines = hostel.display_students().splitlines()
        assert lines[0] == "Alle Bewohner:"
        assert lines[1].startswith("Name: Carol")
        assert lines[2].startswith("Name: Alice")

    def test_occupancy_summary(self, tmp_path):
        hostel = _make_hostel(tmp_path, num_rooms=3)
        hostel.book_room("Alice", 1, 2)
        assert hostel.occupancy_summary() == {"total": 3, "free": 2, "occupied": 1}


# ─── HOSTEL: BUCHEN ───────────────────────────────────────────────────────────

class TestBookRoom:
    def test_book_success(self, tmp_path):
        """Buchung eines freien Zimmers → neuer Bewohner, Zimmer belegt."""
        hostel = _make_hostel(tmp_path)
        result = hostel.book_room("Alice", 1, 2)
        assert isinstance(result, OperationResult)
        assert result.success
        assert result.error is None
        assert [(s.name, s.roll_number, s.room_id) for s in hostel.students] == [("Alice", 1, 2)]
        assert not hostel.get_room(2).available
        _assert_bijection(hostel)

    def test_book_occupied_room_is_noop(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        before = _snapshot(hostel)
        result = hostel.book_room("Bob", 2, 2)
        assert not result.success
        assert result.error == ErrorKind.ROOM_UNAVAILABLE_OR_NOT_FOUND
        assert _snapshot(hostel) == before

    @pytest.mark.parametrize("room_id", [0, -1, 4, 1000])
    def test_book_unknown_room_is_noop(self, tmp_path, room_id):
        """Zimmer-ID außerhalb 1..N → Fehler, keine Änderung."""
        hostel = _make_hostel(tmp_path)
        before = _snapshot(hostel)
        result = hostel.book_room("Alice", 1, room_id)
        assert result.error == ErrorKind.ROOM_UNAVAILABLE_OR_NOT_FOUND
        assert _snapshot(hostel) == before

    @pytest.mark.parametrize("name", ["", "Anna Maria", "Tab\tName"])
    def test_book_invalid_name_is_noop(self, tmp_path, name):
        """Namen mit Leerzeichen sind im Dateiformat nicht speicherbar → abgelehnt."""
        hostel = _make_hostel(tmp_path)
        before = _snapshot(hostel)
        result = hostel.book_room(name, 1, 1)
        assert result.error == ErrorKind.INVALID_NAME
        assert _snapshot(hostel) == before

    def test_duplicate_roll_number_accepted(self, tmp_path):
        """Doppelte Matrikelnummer wird (bewusst) nicht abgewiesen."""
        hostel = _make_hostel(tmp_path)
        assert hostel.book_room("Alice", 1, 1).success
        assert hostel.book_room("Alicia", 1, 2).success
        assert len(hostel.students) == 2
        _assert_bijection(hostel)


# ─── HOSTEL: RÄUMEN ───────────────────────────────────────────────────────────

class TestVacateRoom:
    def test_vacate_success(self, tmp_path):
        """Räumen entfernt den Bewohner und gibt das Zimmer frei."""
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        result = hostel.vacate_room(1)
        assert result.success
        assert hostel.students == []
        assert hostel.get_room(2).available
        _assert_bijection(hostel)

    def test_vacate_unknown_roll_is_noop(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        before = _snapshot(hostel)
        result = hostel.vacate_room(99)
        assert not result.success
        assert result.error == ErrorKind.STUDENT_NOT_FOUND
        assert _snapshot(hostel) == before

    def test_vacate_duplicate_roll_first_match_wins(self, tmp_path):
        """Bei doppelter Matrikelnummer wird nur der erste Eintrag geräumt."""
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 1)
        hostel.book_room("Alicia", 1, 3)
        hostel.vacate_room(1)
        assert [(s.name, s.room_id) for s in hostel.students] == [("Alicia", 3)]
        assert hostel.get_room(1).available
        assert not hostel.get_room(3).available
        _assert_bijection(hostel)

    def test_room_can_be_rebooked_after_vacate(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        hostel.vacate_room(1)
        assert hostel.book_room("Bob", 2, 2).success
        _assert_bijection(hostel)

    def test_find_student(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        assert hostel.find_student(1).name == "Alice"
        assert hostel.find_student(2) is None


# ─── HOSTEL: SUCHEN ───────────────────────────────────────────────────────────

class TestSearch:
    def test_search_found(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        result = hostel.search_room_by_student_name("Alice")
        assert isinstance(result, SearchResult)
        assert result.success
        assert result.student.room_id == 2
        assert result.student.roll_number == 1

    def test_search_is_case_sensitive(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        result = hostel.search_room_by_student_name("alice")
        assert not result.success
        assert result.error == ErrorKind.STUDENT_NOT_FOUND
        assert result.student is None

    def test_search_requires_full_match(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        assert not hostel.search_room_by_student_name("Ali").success

    def test_search_does_not_mutate(self, tmp_path):
        hostel = _make_hostel(tmp_path)
        hostel.book_room("Alice", 1, 2)
        before = _snapshot(hostel)
        hostel.search_room_by_student_name("Alice")
        hostel.search_room_by_student_name("Nobody")
        assert _snapshot(hostel) == before


# ─── SZENARIO ─────────────────────────────────────────────────────────────────

class TestScenario:
    def test_alice_bob_scenario(self, tmp_path):
        """3 Zimmer: Alice bucht 2, Bob scheitert an 2, Alice räumt, Suche leer."""
        hostel = _make_hostel(tmp_path, num_rooms=3)

        assert hostel.book_room("Alice", 1, 2).success
        assert not hostel.get_room(2).available
        assert [(s.name, s.roll_number, s.room_id) for s in hostel.students] == [("Alice", 1, 2)]

        assert not hostel.book_room("Bob", 2, 2).success
        assert not hostel.get_room(2).available
        assert [s.name for s in hostel.students] == ["Alice"]

        assert hostel.vacate_room(1).success
        assert hostel.get_room(2).available
        assert hostel.students == []

        assert not hostel.search_room_by_student_name("Alice").success

    def test_invariant_holds_over_mixed_operations(self, tmp_path):
        hostel = _make_hostel(tmp_path, num_rooms=4)
        ops = [
            ("book", "A", 1, 1), ("book", "B", 2, 1), ("book", "C", 3, 4),
            ("vacate", 1), ("book", "D", 4, 1), ("vacate", 7),
            ("book", "E", 5, 5), ("vacate", 3), ("book", "F", 6, 4),
        ]
        for op in ops:
            if op[0] == "book":
                hostel.book_room(*op[1:])
            else:
                hostel.vacate_room(op[1])
            _assert_bijection(hostel)
        assert [s.name for s in hostel.students] == ["D", "F"]
