"""Server settings for the AI rewrite server."""

import os

PORT: int = int(os.environ.get("PORT", "3001"))
HOST: str = os.environ.get("HOST", "127.0.0.1")
DEBUG: bool = os.environ.get("FLASK_DEBUG", "").lower() in ("1", "true", "yes")
