from functools import lru_cache
from typing import Optional
from openai import AsyncOpenAI
from config import settings


@lru_cache(maxsize=1)
def _build_client(api_key: str, base_url: Optional[str]) -> AsyncOpenAI:
    return AsyncOpenAI(api_key=api_key, base_url=base_url)


def get_llm_client() -> Optional[AsyncOpenAI]:
    """Upstream client, or None when no API key is configured (mock-only mode)."""
    if not settings.openai_configured:
        return None
    return _build_client(settings.OPENAI_API_KEY, settings.OPENAI_BASE_URL)
