from receipt_parser.config.providers import resolve_base_url, supported_providers
from receipt_parser.config.settings import Settings
from receipt_parser.structuring.base import BaseStructurer
from receipt_parser.structuring.example_client_adapter import ExampleClientAdapter
from receipt_parser.structuring.openai_client_adapter import OpenAIClientAdapter
from receipt_parser.structuring.structurer import Structurer


class StructurerFactory:
    """Creates the configured structurer adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseStructurer:
        """Create a configured structurer from application settings."""
        provider = settings.structuring_provider.lower()
        if provider == "example":
            return Structurer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        if provider not in supported_providers():
            raise ValueError(
                f"Unknown structuring provider '{provider}'. "
                f"Choose from: {supported_providers('example')}"
            )
        client = OpenAIClientAdapter(
            api_key=settings.structuring_api_key,
            timeout_seconds=settings.structuring_timeout_seconds,
            base_url=resolve_base_url(
                provider, settings.structuring_base_url, "structuring_base_url"
            ),
        )
        return Structurer(
            client=client,
            model=settings.structuring_model_name,
            temperature=settings.structuring_temperature,
        )
