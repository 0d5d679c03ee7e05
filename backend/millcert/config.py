"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_list(name: str, default: str) -> List[str]:
    return [v.strip() for v in os.getenv(name, default).split(",") if v.strip()]


@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = os.getenv("APP_NAME", "Mill Certification Scoring Service")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Default scoring rules (templates may override per request)
    CRITICAL_WEIGHT: float = float(os.getenv("CRITICAL_WEIGHT", "10"))
    MAJOR_WEIGHT: float = float(os.getenv("MAJOR_WEIGHT", "5"))
    MINOR_WEIGHT: float = float(os.getenv("MINOR_WEIGHT", "2"))
    PASSING_THRESHOLD: float = float(os.getenv("PASSING_THRESHOLD", "75"))
    EXCELLENT_THRESHOLD: float = float(os.getenv("EXCELLENT_THRESHOLD", "90"))
    GOOD_THRESHOLD: float = float(os.getenv("GOOD_THRESHOLD", "75"))
    NEEDS_IMPROVEMENT_THRESHOLD: float = float(os.getenv("NEEDS_IMPROVEMENT_THRESHOLD", "60"))
    AUTO_FAIL_ON_CRITICAL: bool = _env_bool("AUTO_FAIL_ON_CRITICAL", "true")

    # CORS
    CORS_ORIGINS: List[str] = field(
        default_factory=lambda: _env_list("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    )

settings = Settings()
