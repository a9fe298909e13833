"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn messaging.main:app --host 0.0.0.0 --port 5001 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from messaging.config.settings import get_config

if __name__ == "__main__":
    config = get_config()
    debug = config.DEBUG

    print(f"Starting FastAPI application in {config.APP_ENV} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "messaging.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
