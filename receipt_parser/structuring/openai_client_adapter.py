import httpx
import openai

from receipt_parser.structuring.client_base import BaseStructuringClient
from receipt_parser.structuring.exceptions import StructuringError, StructuringNetworkError


class OpenAIClientAdapter(BaseStructuringClient):
    """Structuring AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "expense_data",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise StructuringNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise StructuringNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise StructuringError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise StructuringError("AI returned empty response")
        return content
