# campus_market/services.py
"""Request handling that doesn't touch the listing store."""
import json
import os
from datetime import datetime, timezone
from typing import Dict
from dotenv import load_dotenv
from .utils import logger

load_dotenv()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": os.getenv("CORS_ALLOW_ORIGIN", "*"),
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

def greeting_name(body: bytes) -> str:
    """Pick the name to greet out of a raw request body.

    No body, invalid JSON, a non-object payload or an empty ``name`` all
    fall back to ``"World"``. Bytes that aren't UTF-8 raise
    ``UnicodeDecodeError``.
    """
    text = body.decode("utf-8")
    if not text.strip():
        return "World"
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return "World"
    if isinstance(payload, dict) and payload.get("name"):
        return str(payload["name"])
    return "World"

def hello_world(body: bytes) -> Dict[str, str]:
    name = greeting_name(body)
    logger.info("Processing request for name: %s", name)
    return {
        "message": f"Hello {name}!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
