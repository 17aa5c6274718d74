import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    # App
    APP_NAME: str = os.getenv("APP_NAME", "Grok API Proxy")
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS
    ALLOWED_ORIGINS: list[str] = os.getenv("ALLOWED_ORIGINS", "*").split(",")

    # Grok
    GROK_API_BASE_URL: str = os.getenv("GROK_API_BASE_URL", "https://api.x.ai/v1")
    GROK_API_TIMEOUT: float = float(os.getenv("GROK_API_TIMEOUT", "60"))

    # Request limits
    MAX_BODY_SIZE: int = int(
        os.getenv("MAX_BODY_SIZE", str(50 * 1024 * 1024))
    )  # 50 MB


settings = Settings()
