"""Tests for the finance data JSON codec."""

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from finance_tracker.domain.errors import MalformedImportError
from finance_tracker.domain.models import (
    AccountType,
    AssetCategory,
    FinanceData,
    Frequency,
    Theme,
    TransactionStatus,
    TransactionType,
)
from finance_tracker.infrastructure.serialization import (
    decode_finance_data,
    encode_finance_data,
    finance_data_to_dict,
)

DOCUMENT = {
    "assets": [
        {
            "id": "a1",
            "name": "Brokerage",
            "value": 10500.75,
            "category": "Stocks",
            "createdAt": "2024-03-01T08:00:00.000Z",
        }
    ],
    "liabilities": [
        {
            "id": "l1",
            "name": "Student loan",
            "value": 12000,
            "category": "Student Loan",
            "interestRate": 4.5,
            "description": "Federal",
            "createdAt": "2024-03-01T08:00:00.000Z",
        }
    ],
    "creditCards": [
        {
            "id": "c1",
            "name": "Visa",
            "creditLimit": 3000,
            "outstandingDebt": 420.1,
            "apr": 21.99,
            "paymentDay": 28,
            "createdAt": "2024-03-01T08:00:00.000Z",
        }
    ],
    "transactions": [
        {
            "id": "t1",
            "name": "Card payment",
            "amount": 400,
            "type": "expense",
            "category": "Debt",
            "recurring": True,
            "frequency": "monthly",
            "accountId": "c1",
            "accountType": "creditCard",
            "dayOfMonth": 20,
            "status": "confirmed",
            "lastConfirmedDate": "2024-04-20T10:15:00.000Z",
            "lastConfirmedAmount": 410.5,
            "createdAt": "2024-03-01T08:00:00.000Z",
        }
    ],
    "settings": {
        "currency": "EUR",
        "theme": "dark",
        "includeCreditInNetWorth": True,
    },
    "netWorthHistory": [
        {
            "date": "2024-04-20T10:15:00.000Z",
            "netWorth": -1919.35,
            "totalAssets": 10500.75,
            "totalLiabilities": 12000,
            "totalCreditDebt": 420.1,
            "availableCredit": 2579.9,
        }
    ],
}


def test_decode_reads_camel_case_document() -> None:
    """A full document should decode into domain types."""
    data = decode_finance_data(json.dumps(DOCUMENT))

    asset = data.assets[0]
    assert asset.value == Decimal("10500.75")
    assert asset.category == AssetCategory.STOCKS
    assert asset.created_at == datetime(2024, 3, 1, 8, tzinfo=timezone.utc)
    assert data.liabilities[0].interest_rate == Decimal("4.5")
    assert data.credit_cards[0].outstanding_debt == Decimal("420.1")
    transaction = data.transactions[0]
    assert transaction.type == TransactionType.EXPENSE
    assert transaction.frequency == Frequency.MONTHLY
    assert transaction.account_type == AccountType.CREDIT_CARD
    assert transaction.status == TransactionStatus.CONFIRMED
    assert transaction.last_confirmed_amount == Decimal("410.5")
    assert data.settings.theme == Theme.DARK
    assert data.settings.include_credit_in_net_worth is True
    assert data.net_worth_history[0].net_worth == Decimal("-1919.35")


def test_encode_writes_the_same_document() -> None:
    """Encoding decoded data should reproduce the original document."""
    data = decode_finance_data(json.dumps(DOCUMENT))

    assert json.loads(encode_finance_data(data)) == DOCUMENT


def test_decode_without_history_yields_empty_history() -> None:
    """Documents without netWorthHistory should load an empty history."""
    raw = json.dumps(
        {
            "assets": [],
            "liabilities": [],
            "creditCards": [],
            "transactions": [],
            "settings": {
                "currency": "USD",
                "theme": "light",
                "includeCreditInNetWorth": False,
            },
        }
    )

    assert decode_finance_data(raw) == FinanceData()


def test_transaction_defaults_apply() -> None:
    """Optional transaction fields should fall back to defaults."""
    document = {
        "assets": [],
        "liabilities": [],
        "creditCards": [],
        "transactions": [
            {
                "id": "t1",
                "name": "Bonus",
                "amount": 500,
                "type": "income",
                "createdAt": "2024-03-01T08:00:00Z",
            }
        ],
        "settings": {},
    }

    transaction = decode_finance_data(json.dumps(document)).transactions[0]

    assert transaction.recurring is False
    assert transaction.status == TransactionStatus.ESTIMATED
    assert transaction.category == ""
    assert transaction.account_id is None


def test_encode_omits_unset_optional_fields() -> None:
    """None values should not be written."""
    document = dict(DOCUMENT, liabilities=[], transactions=[])
    document["assets"] = [dict(DOCUMENT["assets"][0])]
    data = decode_finance_data(json.dumps(document))

    payload = finance_data_to_dict(data)

    assert "description" not in payload["assets"][0]
    assert payload["assets"][0]["value"] == 10500.75


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        json.dumps({"assets": []}),
        json.dumps(dict(DOCUMENT, assets=[{"id": "a1"}])),
        json.dumps(
            dict(
                DOCUMENT,
                transactions=[dict(DOCUMENT["transactions"][0], type="gift")],
            )
        ),
    ],
)
def test_decode_rejects_malformed_documents(raw: str) -> None:
    """Invalid JSON or shapes should raise MalformedImportError."""
    with pytest.raises(MalformedImportError):
        decode_finance_data(raw)
