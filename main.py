"""
Swadesh AI backend. Serves /api for the web client.
Local run: python main.py (reads PORT, API_HOST, ENV from the environment).
"""

import uvicorn

from swadesh.core.config import get_settings
from swadesh.factory import create_app

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
        proxy_headers=True,
    )
