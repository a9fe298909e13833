"""
Module-level application for uvicorn:

    uvicorn messaging.main:app --host 0.0.0.0 --port 5001
"""

from messaging.config.logging_config import setup_logging
from messaging.config.settings import Config
from messaging.fastapi_app import create_fastapi_app
from messaging.setup.ioc.container import create_container

setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

# Create container at module level (before app starts)
container = create_container()
app = create_fastapi_app(container)
