import json

import httpx

from receipt_parser.logging.logger import Log
from receipt_parser.persistence.base import BaseExpensePersister
from receipt_parser.persistence.exceptions import PersistenceError
from receipt_parser.persistence.formatting import notion_items_text, notion_title
from receipt_parser.processor.models import DestinationHandle
from receipt_parser.structuring.models import ExpenseData


class NotionPersister(BaseExpensePersister):
    """Creates one page per receipt in a Notion database.

    The database is expected to have the properties Name (title), Merchant (text),
    Date (date), Total (number) and Items (text).
    """

    label = "Notion"

    def __init__(
        self,
        *,
        api_url: str,
        api_version: str,
        timeout_seconds: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url
        self._api_version = api_version
        self._client = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    async def persist(self, data: ExpenseData, destination: DestinationHandle) -> None:
        try:
            response = await self._client.post(
                self._api_url,
                headers={
                    "Authorization": f"Bearer {destination.credentials}",
                    "Notion-Version": self._api_version,
                },
                json=self.build_page(data, destination.target_id),
            )
        except httpx.HTTPError as exc:
            raise PersistenceError(f"Failed to save to Notion: {exc}") from exc

        if response.is_error:
            raise PersistenceError(
                f"Failed to save to Notion: {self._error_message(response)}",
                response.status_code,
            )
        Log.info(f"Created Notion page for {data.merchant!r} in {destination.target_id}")

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def build_page(data: ExpenseData, database_id: str) -> dict[str, object]:
        properties: dict[str, object] = {
            "Name": {"title": [{"text": {"content": notion_title(data)}}]},
            "Merchant": {
                "rich_text": [{"text": {"content": data.merchant or "Unknown Merchant"}}]
            },
            "Total": {"number": data.total},
            "Items": {"rich_text": [{"text": {"content": notion_items_text(data.items)}}]},
        }
        # Notion rejects an empty date start.
        if data.date:
            properties["Date"] = {"date": {"start": data.date}}
        return {"parent": {"database_id": database_id}, "properties": properties}

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return response.text or "An unknown error occurred while contacting the Notion API."
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return json.dumps(payload)
