from typing import Any

from openai import AsyncOpenAI

from grok_proxy.schemas.chat import ChatRequest


async def create_chat_completion(
    client: AsyncOpenAI, request: ChatRequest
) -> Any:
    """
    Forward a chat completion to Grok using the caller's API key.

    Returns the upstream JSON body untouched. Non-2xx replies raise
    openai.APIStatusError; transport failures and timeouts raise
    openai.APIConnectionError.
    """
    response = await client.with_options(
        api_key=request.api_key
    ).chat.completions.with_raw_response.create(**request.upstream_params())

    return response.http_response.json()
