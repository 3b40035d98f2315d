"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    TESTING = _env_flag("TESTING")
    DEBUG = _env_flag("DEBUG")

    # Persistence: "prisma" (PostgreSQL through prisma-client-py) or "memory"
    PERSISTENCE_BACKEND: str = os.getenv("PERSISTENCE_BACKEND", "prisma")

    # Postgresql Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Default page size for conversation listings
    CONVERSATION_PAGE_SIZE: int = int(os.getenv("CONVERSATION_PAGE_SIZE", "20"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    PERSISTENCE_BACKEND = "memory"


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
