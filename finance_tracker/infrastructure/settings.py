"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from finance_tracker.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("json", "sqlalchemy")


@dataclass(frozen=True)
class TrackerSettings:
    """Settings for selecting and locating the storage backend.

    Attributes:
        backend: Storage backend identifier (json or sqlalchemy).
        data_file: Path of the JSON document for the json backend.
        db_url: Database URL for the sqlalchemy backend.
        export_dir: Directory receiving exported documents.
    """

    backend: str = "json"
    data_file: Path = Path("data/finance-data.json")
    db_url: Optional[str] = None
    export_dir: Path = Path(".")

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables.

        Returns:
            TrackerSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If the backend is unknown or the sqlalchemy backend
                has no database URL.
        """
        dotenv.load_dotenv()
        backend = os.getenv("FINANCE_STORAGE_BACKEND", "json").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            raise RuntimeError(
                f"Unsupported FINANCE_STORAGE_BACKEND '{backend}'. "
                f"Expected one of: {', '.join(SUPPORTED_BACKENDS)}."
            )
        db_url = os.getenv("FINANCE_DB_URL") or None
        if backend == "sqlalchemy" and db_url is None:
            raise RuntimeError(
                "The sqlalchemy backend requires a FINANCE_DB_URL value."
            )
        raw_file = os.getenv("FINANCE_DATA_FILE")
        data_file = (
            cls._normalize_path(raw_file)
            if raw_file
            else get_project_root() / "data" / "finance-data.json"
        )
        raw_export = os.getenv("FINANCE_EXPORT_DIR")
        export_dir = (
            cls._normalize_path(raw_export) if raw_export else Path.cwd()
        )
        return cls(
            backend=backend,
            data_file=data_file,
            db_url=db_url,
            export_dir=export_dir,
        )

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Expand the user directory and resolve a path.

        Args:
            raw_path: Raw file path string.

        Returns:
            Path: Absolute path.
        """
        return Path(raw_path).expanduser().resolve()


__all__ = ["TrackerSettings", "SUPPORTED_BACKENDS"]
