"""Tests for the GetCreditUtilizationUseCase."""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from finance_tracker.application.use_cases.get_credit_utilization import (
    GetCreditUtilizationUseCase,
)
from finance_tracker.domain.models import CreditCard, FinanceData


def test_execute_rates_overall_utilization() -> None:
    """Use case should report the overall rate and rating."""
    card = CreditCard(
        id="c1",
        name="Amex",
        credit_limit=Decimal("2000"),
        outstanding_debt=Decimal("1500"),
        apr=Decimal("22"),
        payment_day=1,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    store = SimpleNamespace(data=FinanceData(credit_cards=(card,)))
    logger = MagicMock()

    utilization = GetCreditUtilizationUseCase(store, logger=logger).execute()

    assert utilization.utilization_rate == Decimal("75")
    assert utilization.rating == "Consider paying down"
    assert utilization.cards[0].available_credit == Decimal("500")
    logger.info.assert_called_once()
