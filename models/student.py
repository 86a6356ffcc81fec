"""Datenmodell für eine Bewohnerin / einen Bewohner (Pydantic v2)."""

from typing import Mapping, Optional

from pydantic import BaseModel, Field

from models.room import Room


class Student(BaseModel):
    """Person im Belegungsplan mit höchstens einem zugewiesenen Zimmer.

    Das Zimmer wird nur über seine ID referenziert und bei Bedarf im
    Zimmerbestand des Hostels nachgeschlagen.
    """

    name: str = Field(min_length=1)
    roll_number: int                  # Matrikelnummer (nicht global eindeutig)
    room_id: Optional[int] = None     # None = kein Zimmer zugewiesen

    @property
    def has_room(self) -> bool:
        return self.room_id is not None

    def assign_room(self, room: Room) -> None:
        """Weist das Zimmer zu und markiert es als belegt."""
        self.room_id = room.id
        room.book()

    def vacate_room(self, rooms: Mapping[int, Room]) -> None:
        """Gibt das zugewiesene Zimmer frei. Ohne Zimmer: keine Wirkung."""
        if self.room_id is None:
            return
        room = rooms.get(self.room_id)
        if room is not None:
            room.free()
        self.room_id = None

    def display(self) -> str:
        room_label = str(self.room_id) if self.room_id is not None else "Nicht zugewiesen"
        return (
            f"Name: {self.name} | Matrikelnr.: {self.roll_number} | "
            f"Zimmer-ID: {room_label}"
        )
