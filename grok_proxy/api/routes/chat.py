from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from loguru import logger
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from grok_proxy.llm.utils import get_grok_client
from grok_proxy.schemas.chat import API_KEY_PREFIX, ChatRequest
from grok_proxy.services.grok_service import create_chat_completion

router = APIRouter()


def _upstream_error_details(error: APIStatusError) -> Any:
    try:
        return error.response.json()
    except ValueError:
        return error.response.text


@router.post("/api/chat")
async def chat(
    payload: Any = Body(None),
    client: AsyncOpenAI = Depends(get_grok_client),
):
    """
    Grok chat completion proxy.

    Validates the caller's API key and messages, forwards the request to
    Grok with the caller's key and relays the upstream reply. Upstream
    failures are translated to JSON errors:
    - upstream error status -> same status, upstream message and payload
    - no response / timeout -> 503
    - anything else -> 500
    """
    try:
        logger.info("Received chat request")

        if not isinstance(payload, dict):
            payload = {}

        api_key = payload.get("apiKey")
        if not isinstance(api_key, str) or not api_key.startswith(API_KEY_PREFIX):
            logger.warning("Invalid API key")
            return JSONResponse(
                status_code=400,
                content={
                    "error": f"Invalid API key format. Must start with {API_KEY_PREFIX}"
                },
            )

        messages = payload.get("messages")
        if not isinstance(messages, list) or len(messages) == 0:
            logger.warning("Invalid messages")
            return JSONResponse(
                status_code=400,
                content={"error": "Messages array is required and must not be empty"},
            )

        chat_request = ChatRequest(**payload)
        logger.info(f"Processing request with {len(chat_request.messages)} messages")

        data = await create_chat_completion(client, chat_request)

        logger.info("Grok API response received")
        return JSONResponse(status_code=200, content=data)

    except APIStatusError as e:
        details = _upstream_error_details(e)
        logger.error(f"Grok API error {e.status_code}: {details}")

        message = "API request failed"
        if isinstance(details, dict) and isinstance(details.get("error"), dict):
            message = details["error"].get("message") or message

        return JSONResponse(
            status_code=e.status_code,
            content={"error": message, "details": details},
        )

    except APIConnectionError as e:
        logger.error(f"No response from Grok API: {str(e)}")
        return JSONResponse(
            status_code=503,
            content={
                "error": "No response from Grok API. Service may be unavailable.",
                "details": str(e),
            },
        )

    except Exception as e:
        logger.error(f"Chat proxy error: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": str(e)},
        )
