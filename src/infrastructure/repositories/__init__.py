"""Repository Implementations"""
from .dynamodb_reminder_repository import DynamoDBReminderRepository

__all__ = ["DynamoDBReminderRepository"]
