"""
Runtime configuration for the Lifetime GPS matching service.
Values come from the environment (optionally a local .env file).
"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

CAREER_CATALOG_PATH = Path(
    os.getenv("CAREER_CATALOG_PATH", str(BASE_DIR / "data" / "careers.json"))
)

DEFAULT_TOP_N = int(os.getenv("DEFAULT_TOP_N", "5"))
MAX_TOP_N = int(os.getenv("MAX_TOP_N", "25"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, level or LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
