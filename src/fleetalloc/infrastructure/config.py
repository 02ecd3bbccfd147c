"""Runtime settings, read from the environment (and a ``.env`` file if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    low_stock_threshold: int = 5
    dedup_window_minutes: int = 5
    max_alternatives: int = 5
    max_alternative_parts: int = 3
    log_level: str = "WARNING"

    @property
    def dedup_window(self) -> timedelta:
        return timedelta(minutes=self.dedup_window_minutes)

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            data_dir=Path(os.getenv("FLEETALLOC_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            low_stock_threshold=int(os.getenv("FLEETALLOC_LOW_STOCK_THRESHOLD", "5")),
            dedup_window_minutes=int(os.getenv("FLEETALLOC_DEDUP_WINDOW_MINUTES", "5")),
            max_alternatives=int(os.getenv("FLEETALLOC_MAX_ALTERNATIVES", "5")),
            max_alternative_parts=int(os.getenv("FLEETALLOC_MAX_ALTERNATIVE_PARTS", "3")),
            log_level=os.getenv("FLEETALLOC_LOG_LEVEL", "WARNING").upper(),
        )
