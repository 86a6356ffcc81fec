from pydantic import BaseModel, Field, field_validator, model_validator


# ─── DATEIEN ───

class StorageConfig(BaseModel):
    """Dateipfade für Belegungsliste und Zimmerbericht."""
    # Belegungsliste, eine Zeile pro Bewohner (<name> <matrikelnr> <zimmer|NA>)
    data_file: str = Field("hostel_data.txt",
        description="Datei der Belegungsliste")
    # Zimmerstatus-Bericht (<zimmer_id> <Available|Occupied>)
    room_report_file: str = Field("output/room_report.txt",
        description="Datei für den Zimmerstatus-Bericht")

    @model_validator(mode='after')
    def validate_distinct_files(self):
        """Bericht darf die Belegungsliste nicht überschreiben."""
        if self.data_file == self.room_report_file:
            raise ValueError(
                f"data_file und room_report_file zeigen auf dieselbe Datei: {self.data_file}")
        return self


# ─── LOGGING ───

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class LoggingConfig(BaseModel):
    """Log-Ausgabe auf der Konsole."""
    # Standard-Level, wenn nicht --verbose angegeben ist
    level: str = Field("WARNING",
        description="Log-Level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Unbekanntes Log-Level '{v}', erlaubt: {', '.join(_LOG_LEVELS)}")
        return v


# ─── GESAMT-CONFIG ───

class HostelConfig(BaseModel):
    """Gesamtkonfiguration des Wohnheims."""
    # Name des Wohnheims (nur für die Anzeige)
    hostel_name: str = Field("Studentenwohnheim",
        description="Name des Wohnheims")
    # Anzahl Zimmer; fest für die gesamte Laufzeit (IDs 1..num_rooms)
    num_rooms: int = Field(50, ge=1, le=10000,
        description="Anzahl Zimmer")
    # Dateipfade
    storage: StorageConfig = Field(default_factory=StorageConfig)
    # Log-Ausgabe
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def data_file(self) -> str:
        return self.storage.data_file
