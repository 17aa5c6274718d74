from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def read_root():
    return {
        "status": "ok",
        "message": "Grok API Proxy Server is running",
        "endpoints": {
            "chat": "POST /api/chat",
            "health": "GET /health",
        },
    }


@router.get("/health")
def health():
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return {
        "status": "healthy",
        "timestamp": timestamp.replace("+00:00", "Z"),
        "cors": "enabled",
    }
