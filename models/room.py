"""Datenmodell für ein Wohnheimzimmer (Pydantic v2)."""

from pydantic import BaseModel, Field


class Room(BaseModel):
    """Ein Zimmer mit binärem Belegungsstatus.

    Die ID wird einmalig bei der Erzeugung vergeben und ändert sich nie.
    Vorbedingungen für book()/free() prüft der Aufrufer (Hostel), nicht das Zimmer.
    """

    id: int = Field(ge=1)     # 1..N, dicht vergeben
    available: bool = True

    @property
    def status_label(self) -> str:
        return "Frei" if self.available else "Belegt"

    def book(self) -> None:
        """Markiert das Zimmer als belegt."""
        self.available = False

    def free(self) -> None:
        """Markiert das Zimmer als frei."""
        self.available = True

    def display(self) -> str:
        """Einzeilige Statusanzeige, z.B. "Zimmer-ID: 3 | Status: Frei"."""
        return f"Zimmer-ID: {self.id} | Status: {self.status_label}"
