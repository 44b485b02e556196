"""Entry point for running the API server."""

import os

import uvicorn

from core.config import get_settings

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    # PORT is set by most PaaS platforms
    port = int(os.getenv("PORT") or "8000")
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        log_level=get_settings().log_level.lower(),
    )
