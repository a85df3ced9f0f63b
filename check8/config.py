"""Library configuration using Pydantic Settings."""

from pathlib import Path

from pydantic_settings import BaseSettings

# Optional .env in the project root (dev checkouts)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Settings loaded from CHECK8_* environment variables and .env file."""

    # CRC engine: use the 256-entry lookup table instead of the bit loop
    table_driven: bool = True

    # Algorithm returned by registry.get_algorithm() when no name is given
    default_algorithm: str = "CRC-8"

    model_config = {"env_prefix": "CHECK8_", "env_file": str(_ENV_FILE), "extra": "ignore"}


settings = Settings()
