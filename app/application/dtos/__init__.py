"""Application DTOs: plain data carriers between layers (no ORM)."""

from app.application.dtos.user import UserResult

__all__ = ["UserResult"]
