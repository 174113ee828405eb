"""Reminder Entities"""
from .reminder import KEY_SCHEMA, Reminder, ReminderKeySchema

__all__ = ["KEY_SCHEMA", "Reminder", "ReminderKeySchema"]
