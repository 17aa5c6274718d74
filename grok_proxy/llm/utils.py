from openai import AsyncOpenAI

from grok_proxy.core.config import settings

# Callers always supply their own key via with_options(); this one is never sent.
grok_client = AsyncOpenAI(
    api_key="unset",
    base_url=settings.GROK_API_BASE_URL,
    timeout=settings.GROK_API_TIMEOUT,
    max_retries=0,
)


def get_grok_client() -> AsyncOpenAI:
    return grok_client
