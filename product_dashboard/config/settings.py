# product_dashboard/config/settings.py

"""Central configuration for the product dashboard."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the product dashboard."""

    # --- Remote catalog ---
    CATALOG_BASE_URL: str = os.getenv(
        "CATALOG_BASE_URL", "https://fakestoreapi.com"
    ).rstrip("/")
    REQUEST_TIMEOUT: int = 10           # Seconds before a request times out
    DEFAULT_HEADERS: dict[str, str] = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    # The demo catalog answers every create with the same id and keeps
    # nothing, so new products get a millisecond timestamp id locally.
    ASSIGN_LOCAL_IDS: bool = (
        os.getenv("ASSIGN_LOCAL_IDS", "true").lower() != "false"
    )

    # --- Products ---
    CURRENCY: str = "USD"
    DEFAULT_CATEGORY: str = "electronics"
    DEFAULT_IMAGE_URL: str = (
        "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg"
    )

    # --- Form limits ---
    TITLE_MIN_LENGTH: int = 3
    TITLE_MAX_LENGTH: int = 100
    DESCRIPTION_MIN_LENGTH: int = 10
    DESCRIPTION_MAX_LENGTH: int = 500
    DESCRIPTION_PREVIEW_LENGTH: int = 100

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
