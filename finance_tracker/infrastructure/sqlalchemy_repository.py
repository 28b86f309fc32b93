"""Finance data repository storing the JSON document in a SQL table."""

from sqlalchemy import text

from finance_tracker.application.ports.database import DatabaseEnginePort
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

DEFAULT_STORAGE_KEY = "financeData"

CREATE_FINANCE_STORE_SQL = """
CREATE TABLE IF NOT EXISTS finance_store (
    storage_key VARCHAR(255) PRIMARY KEY,
    payload TEXT NOT NULL
)
"""

SELECT_PAYLOAD_SQL = text(
    """
    SELECT payload
    FROM finance_store
    WHERE storage_key = :key
    """
)

DELETE_PAYLOAD_SQL = text(
    """
    DELETE FROM finance_store
    WHERE storage_key = :key
    """
)

INSERT_PAYLOAD_SQL = text(
    """
    INSERT INTO finance_store (storage_key, payload)
    VALUES (:key, :payload)
    """
)


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Key-value storage of the finance data document.

    The table is created on first use. Each save replaces the row for the
    configured key inside a single transaction.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        key: str = DEFAULT_STORAGE_KEY,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the storage engine.
            key: Row key under which the document is stored.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._key = key
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def load(self) -> FinanceData | None:
        """Return the stored data, or None when missing or unreadable."""
        engine = self._db_port.get_finance_engine()
        self._ensure_table(engine)
        with engine.connect() as conn:
            row = conn.execute(SELECT_PAYLOAD_SQL, {"key": self._key}).first()
        if row is None:
            return None
        try:
            return decode_finance_data(row.payload)
        except MalformedImportError as exc:
            self._logger.error(
                f"Error loading finance data for key={self._key}: {exc}"
            )
            return None

    def save(self, data: FinanceData) -> None:
        """Replace the stored document with ``data``."""
        engine = self._db_port.get_finance_engine()
        self._ensure_table(engine)
        payload = encode_finance_data(data)
        with engine.begin() as conn:
            conn.execute(DELETE_PAYLOAD_SQL, {"key": self._key})
            conn.execute(
                INSERT_PAYLOAD_SQL,
                {"key": self._key, "payload": payload},
            )
        self._logger.debug(
            f"Saved finance data for key={self._key} ({len(payload)} bytes)"
        )

    def _ensure_table(self, engine) -> None:
        if self._table_ready:
            return
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_FINANCE_STORE_SQL)
        self._table_ready = True


__all__ = ["SqlAlchemyFinanceRepository", "DEFAULT_STORAGE_KEY"]
