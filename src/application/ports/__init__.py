"""Application Ports (Interfaces)"""
from .repositories import IReminderRepository, PersistenceError

__all__ = [
    "IReminderRepository",
    "PersistenceError",
]
