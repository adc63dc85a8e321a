"""Application configuration settings"""

import os
from dotenv import load_dotenv

from chat_service import __version__

load_dotenv()


class Config:
    # App settings
    APP_NAME = os.getenv("APP_NAME", "chat-service")
    APP_VERSION = __version__
    APP_ENV = os.getenv("APP_ENV", "production")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Postgresql Database settings (read by prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Sessions
    # One fixed TTL; tokens are not extended on use.
    SESSION_TTL_SECONDS: int = int(os.getenv("SESSION_TTL_SECONDS", "3600"))
    SESSION_SWEEP_INTERVAL_SECONDS: int = int(
        os.getenv("SESSION_SWEEP_INTERVAL_SECONDS", "600")
    )

    # Messages
    DEFAULT_CHANNEL: str = os.getenv("DEFAULT_CHANNEL", "general")


class DevelopmentConfig(Config):
    """Development configuration"""

    APP_ENV = "development"
    LOG_LEVEL = "DEBUG"


class TestingConfig(Config):
    """Testing configuration"""

    APP_ENV = "testing"


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": ProductionConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "production")
    return config.get(env, config["default"])
