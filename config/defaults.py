from config.schema import HostelConfig, LoggingConfig, StorageConfig

DEFAULT_NUM_ROOMS = 50
DEFAULT_DATA_FILE = "hostel_data.txt"


def default_hostel_config() -> HostelConfig:
    """Standard-Konfiguration: 50 Zimmer, Belegungsliste in hostel_data.txt.

    Wird verwendet, solange keine config/hostel_config.yaml existiert.
    """
    return HostelConfig(
        hostel_name="Studentenwohnheim",
        num_rooms=DEFAULT_NUM_ROOMS,
        storage=StorageConfig(
            data_file=DEFAULT_DATA_FILE,
            room_report_file="output/room_report.txt",
        ),
        logging=LoggingConfig(level="WARNING"),
    )
