from receipt_parser.config.settings import Settings
from receipt_parser.database.repositories.expense_repository import ExpenseRepository
from receipt_parser.persistence.base import BaseExpensePersister
from receipt_parser.persistence.google_sheets_adapter import GoogleSheetsPersister
from receipt_parser.persistence.notion_adapter import NotionPersister
from receipt_parser.persistence.postgres_adapter import PostgresPersister


class PersisterFactory:
    """Creates the persistence strategy selected by settings."""

    TARGETS = ("google_sheets", "notion", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> BaseExpensePersister:
        target = settings.persistence_target.lower()
        if target == "google_sheets":
            return GoogleSheetsPersister(
                api_url=settings.google_sheets_api_url,
                value_range=settings.google_sheets_range,
                timeout_seconds=settings.persistence_timeout_seconds,
            )
        if target == "notion":
            return NotionPersister(
                api_url=settings.notion_api_url,
                api_version=settings.notion_api_version,
                timeout_seconds=settings.persistence_timeout_seconds,
            )
        if target == "postgres":
            return PostgresPersister(ExpenseRepository())
        raise ValueError(
            f"Unknown persistence target '{target}'. Choose from: {list(cls.TARGETS)}"
        )
