from typing import Any

from pydantic import BaseModel, ConfigDict, Field

API_KEY_PREFIX = "gsk_"

DEFAULT_MODEL = "grok-beta"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 4000


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    messages: list[Any]
    model: Any = None
    temperature: Any = None
    max_tokens: Any = None
    api_key: str = Field(alias="apiKey")

    def upstream_params(self) -> dict[str, Any]:
        """
        Chat completion parameters sent to Grok.

        Optional values are passed through as sent; falsy ones fall back to defaults.
        """
        return {
            "model": self.model or DEFAULT_MODEL,
            "messages": self.messages,
            "temperature": self.temperature or DEFAULT_TEMPERATURE,
            "max_tokens": self.max_tokens or DEFAULT_MAX_TOKENS,
            "stream": False,
        }
