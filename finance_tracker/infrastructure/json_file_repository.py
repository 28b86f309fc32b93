"""Finance data repository backed by a JSON file."""

from pathlib import Path

from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.domain.errors import MalformedImportError
from finance_tracker.domain.models import FinanceData
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.serialization import (
    decode_finance_data,
    encode_finance_data,
)


class JsonFileFinanceRepository(FinanceRepositoryPort):
    """Store the whole finance data document in a single JSON file."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> FinanceData | None:
        """Return the stored data, or None when missing or unreadable."""
        if not self._path.exists():
            return None
        try:
            return decode_finance_data(self._path.read_bytes())
        except MalformedImportError as exc:
            self._logger.error(
                f"Error loading finance data from {self._path}: {exc}"
            )
            return None

    def save(self, data: FinanceData) -> None:
        """Write the data, replacing the previous document."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(encode_finance_data(data), encoding="utf-8")
        tmp_path.replace(self._path)


__all__ = ["JsonFileFinanceRepository"]
