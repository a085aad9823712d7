"""Application interfaces (ports) implemented by infrastructure."""

from app.application.interfaces.repositories import IUserRepository

__all__ = ["IUserRepository"]
