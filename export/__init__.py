"""Ausgabe-Modul: Terminal-Darstellung, interaktives Menü und Zimmerstatus-Bericht."""

from export.room_report import RoomReportExporter
from export.tui_menu import HostelMenu

__all__ = ["RoomReportExporter", "HostelMenu"]
