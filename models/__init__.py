from models.room import Room
from models.student import Student
from models.results import ErrorKind, OperationResult, SearchResult, LoadResult
from models.hostel import Hostel

__all__ = [
    "Room",
    "Student",
    "ErrorKind",
    "OperationResult",
    "SearchResult",
    "LoadResult",
    "Hostel",
]
