"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def positive_int_env(name: str, default: int) -> int:
    """Read an integer setting that must be at least 1."""
    value = int(os.getenv(name, str(default)))
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH: str | None = os.getenv("LOG_PATH") or None
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Postgresql Database settings (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Pagination - number of chat messages / chat rooms per page
    CHAT_PAGE_SIZE: int = positive_int_env("CHAT_PAGE_SIZE", 10)


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
