from typing import Final

OPENAI_COMPATIBLE_BASE_URLS: Final[dict[str, str]] = {
    "openrouter": "https://openrouter.ai/api/v1",
    "groq": "https://api.groq.com/openai/v1",
    "together": "https://api.together.xyz/v1",
    "deepseek": "https://api.deepseek.com/v1",
    "ollama": "http://localhost:11434/v1",
}


def resolve_base_url(provider: str, custom_base_url: str | None, setting_name: str) -> str | None:
    """Return the API base URL for an OpenAI-compatible provider.

    ``openai`` talks to the default endpoint (None). ``openai_compatible`` requires
    an explicit URL from settings. Known hosted providers fall back to their
    public endpoint unless a custom URL is configured.

    Raises:
        ValueError: for unknown providers or a missing custom URL.
    """
    custom = (custom_base_url or "").strip()
    if provider == "openai":
        return custom or None
    if provider == "openai_compatible":
        if not custom:
            raise ValueError(f"{setting_name} is required for provider=openai_compatible")
        return custom
    default_base_url = OPENAI_COMPATIBLE_BASE_URLS.get(provider)
    if default_base_url is not None:
        return custom or default_base_url
    raise ValueError(f"Unknown provider '{provider}'")


def supported_providers(*extra: str) -> list[str]:
    return [*extra, "openai", "openai_compatible", *sorted(OPENAI_COMPATIBLE_BASE_URLS)]
