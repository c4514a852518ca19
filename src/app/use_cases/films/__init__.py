"""
Film Use Cases

Screening catalog consumed by the attendance ledger.
"""

from .film_use_cases import (
    CreateFilmUseCase,
    DeleteFilmUseCase,
    GetFilmUseCase,
    ListFilmsUseCase,
    UpdateFilmUseCase,
)
from .dtos import (
    CreateFilmCommand,
    FilmMessageResponse,
    FilmResponse,
    FilmScope,
    UpdateFilmCommand,
)

__all__ = [
    # Use Cases
    "CreateFilmUseCase",
    "ListFilmsUseCase",
    "GetFilmUseCase",
    "UpdateFilmUseCase",
    "DeleteFilmUseCase",
    # DTOs
    "FilmScope",
    "CreateFilmCommand",
    "UpdateFilmCommand",
    "FilmResponse",
    "FilmMessageResponse",
]
