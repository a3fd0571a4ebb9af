"""Uvicorn entry point for the odds backend."""

import os

import uvicorn
from dotenv import load_dotenv


def main():
    """Start the odds backend API server."""
    load_dotenv()

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    uvicorn.run(
        "odds_backend.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    main()
