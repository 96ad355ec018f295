"""AI-powered receipt structurer."""

import json
from pathlib import Path

from receipt_parser.logging.logger import Log
from receipt_parser.structuring.base import BaseStructurer
from receipt_parser.structuring.client_base import BaseStructuringClient
from receipt_parser.structuring.exceptions import StructuringError
from receipt_parser.structuring.models import ExpenseData
from receipt_parser.structuring.prompt_loader import load_json_schema, load_prompt_template
from receipt_parser.structuring.validator import validate_and_build

INVALID_STRUCTURE_MESSAGE = (
    "AI failed to generate a valid data structure. The receipt might be ambiguous."
)


class Structurer(BaseStructurer):
    """Turns raw receipt text into ExpenseData using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseStructuringClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "You extract expense data from receipts.",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        if self._temperature != temperature:
            Log.warning(
                f"Structuring temperature {temperature} is outside 0.0-0.2, "
                f"using {self._temperature}"
            )
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    async def structure(self, text: str) -> ExpenseData:
        prompt = self._build_prompt(text)
        Log.debug(f"Structuring prompt:\n{prompt}")

        raw_response = await self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        result = validate_and_build(parsed)

        Log.info(f"Structuring complete: {result.merchant!r}, {len(result.items)} items")
        return result

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            receipt_text=text,
            json_schema=self._json_schema,
        )

    async def _call_ai(self, prompt: str) -> str:
        return await self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            Log.error(f"Failed to parse structuring response: {exc}")
            raise StructuringError(INVALID_STRUCTURE_MESSAGE) from exc

        if not isinstance(parsed, dict):
            raise StructuringError(INVALID_STRUCTURE_MESSAGE)
        return parsed
