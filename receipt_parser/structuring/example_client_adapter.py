"""Example structuring client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseStructuringClient and register the provider in StructurerFactory.
"""

import json
from typing import ClassVar

from receipt_parser.structuring.client_base import BaseStructuringClient


class ExampleClientAdapter(BaseStructuringClient):
    """Example adapter that returns a fixed valid expense JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "merchant": "Example Store",
        "date": "2024-01-01",
        "total": 0.0,
        "items": [],
    }

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
