import httpx

from receipt_parser.logging.logger import Log
from receipt_parser.persistence.base import BaseExpensePersister
from receipt_parser.persistence.exceptions import PersistenceError
from receipt_parser.persistence.formatting import sheet_row
from receipt_parser.processor.models import DestinationHandle
from receipt_parser.structuring.models import ExpenseData


class GoogleSheetsPersister(BaseExpensePersister):
    """Appends one row per receipt to a Google spreadsheet."""

    label = "Google Sheets"

    def __init__(
        self,
        *,
        api_url: str,
        value_range: str,
        timeout_seconds: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._range = value_range
        self._client = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    async def persist(self, data: ExpenseData, destination: DestinationHandle) -> None:
        url = f"{self._api_url}/{destination.target_id}/values/{self._range}:append"
        try:
            response = await self._client.post(
                url,
                params={"valueInputOption": "USER_ENTERED"},
                headers={"Authorization": f"Bearer {destination.credentials}"},
                json={"values": [sheet_row(data)]},
            )
        except httpx.HTTPError as exc:
            raise PersistenceError(f"Google Sheets network error: {exc}") from exc

        if response.is_error:
            raise PersistenceError(self._error_message(response), response.status_code)
        Log.info(f"Appended expense from {data.merchant!r} to sheet {destination.target_id}")

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return "Failed to save to Google Sheets"
