"""Tests for the JSON file repository."""

import json
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

from finance_tracker.domain.models import (
    Asset,
    AssetCategory,
    FinanceData,
    Settings,
)
from finance_tracker.infrastructure.json_file_repository import (
    JsonFileFinanceRepository,
)


def _data() -> FinanceData:
    return FinanceData(
        assets=(
            Asset(
                id="a1",
                name="Savings",
                value=Decimal("2500.40"),
                category=AssetCategory.SAVINGS,
                created_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
            ),
        ),
        settings=Settings(currency="CAD"),
    )


def test_load_returns_none_when_file_missing(tmp_path: Path) -> None:
    """A missing file should load as None."""
    repository = JsonFileFinanceRepository(
        tmp_path / "missing.json",
        logger=MagicMock(),
    )

    assert repository.load() is None


def test_save_then_load_returns_data(tmp_path: Path) -> None:
    """Saved data should load back unchanged."""
    path = tmp_path / "nested" / "finance.json"
    repository = JsonFileFinanceRepository(path, logger=MagicMock())

    repository.save(_data())

    assert path.exists()
    assert not (path.parent / "finance.json.tmp").exists()
    assert json.loads(path.read_text())["creditCards"] == []
    assert repository.load() == _data()


def test_load_logs_and_returns_none_for_corrupt_file(tmp_path: Path) -> None:
    """Corrupt documents should be reported and ignored."""
    path = tmp_path / "finance.json"
    path.write_text("{broken", encoding="utf-8")
    logger = MagicMock()
    repository = JsonFileFinanceRepository(path, logger=logger)

    assert repository.load() is None
    logger.error.assert_called_once()


def test_load_returns_none_for_invalid_utf8(tmp_path: Path) -> None:
    """Files that are not valid UTF-8 should load as missing data."""
    path = tmp_path / "finance.json"
    path.write_bytes(b'{"assets": "\xff\xfe"}')
    logger = MagicMock()
    repository = JsonFileFinanceRepository(path, logger=logger)

    assert repository.load() is None
    logger.error.assert_called_once()
