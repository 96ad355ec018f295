import base64

import httpx
import openai

from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.extraction.exceptions import ExtractionError
from receipt_parser.logging.logger import Log
from receipt_parser.processor.models import ReceiptImage

OCR_PROMPT = (
    "Extract all visible text from this receipt image. "
    "Preserve the layout and structure as much as possible."
)


class OpenAIVisionAdapter(BaseTextExtractor):
    """OCR through an OpenAI-compatible chat model with image input."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def extract(self, image: ReceiptImage) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                temperature=0.0,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": OCR_PROMPT},
                            {
                                "type": "image_url",
                                "image_url": {"url": self._data_url(image)},
                            },
                        ],
                    }
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionError(f"OCR provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ExtractionError(f"OCR provider API error: {exc}") from exc

        if not response.choices:
            raise ExtractionError("OCR provider returned no choices")
        text = response.choices[0].message.content or ""
        Log.debug(f"OCR raw text for {image.file_name}:\n{text}")
        return text

    @staticmethod
    def _data_url(image: ReceiptImage) -> str:
        encoded = base64.b64encode(image.content).decode("ascii")
        return f"data:{image.mime_type};base64,{encoded}"
