"""JSON codec for the persisted finance data document.

The document uses camelCase keys. Pydantic schemas validate its shape and
convert between the document and the domain dataclasses.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from finance_tracker.domain.constants import DEFAULT_CURRENCY
from finance_tracker.domain.errors import MalformedImportError
from finance_tracker.domain.models import (
    AccountType,
    Asset,
    AssetCategory,
    CreditCard,
    FinanceData,
    Frequency,
    Liability,
    LiabilityCategory,
    NetWorthSnapshot,
    Settings,
    Theme,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from finance_tracker.utils.time_utils import format_timestamp


def _ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[datetime, AfterValidator(_ensure_aware)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class AssetSchema(_CamelModel):
    id: str
    name: str
    value: Decimal
    category: AssetCategory
    description: str | None = None
    created_at: Timestamp

    def to_domain(self) -> Asset:
        return Asset(**self.model_dump())


class LiabilitySchema(_CamelModel):
    id: str
    name: str
    value: Decimal
    category: LiabilityCategory
    interest_rate: Decimal | None = None
    description: str | None = None
    created_at: Timestamp

    def to_domain(self) -> Liability:
        return Liability(**self.model_dump())


class CreditCardSchema(_CamelModel):
    id: str
    name: str
    credit_limit: Decimal
    outstanding_debt: Decimal
    apr: Decimal
    payment_day: int
    created_at: Timestamp

    def to_domain(self) -> CreditCard:
        return CreditCard(**self.model_dump())


class TransactionSchema(_CamelModel):
    id: str
    name: str
    amount: Decimal
    type: TransactionType
    category: str = ""
    recurring: bool = False
    frequency: Frequency | None = None
    account_id: str | None = None
    account_type: AccountType | None = None
    day_of_month: int | None = None
    status: TransactionStatus = TransactionStatus.ESTIMATED
    last_confirmed_date: Timestamp | None = None
    last_confirmed_amount: Decimal | None = None
    created_at: Timestamp

    def to_domain(self) -> Transaction:
        return Transaction(**self.model_dump())


class NetWorthSnapshotSchema(_CamelModel):
    date: Timestamp
    net_worth: Decimal
    total_assets: Decimal
    total_liabilities: Decimal
    total_credit_debt: Decimal
    available_credit: Decimal

    def to_domain(self) -> NetWorthSnapshot:
        return NetWorthSnapshot(**self.model_dump())


class SettingsSchema(_CamelModel):
    currency: str = DEFAULT_CURRENCY
    theme: Theme = Theme.LIGHT
    include_credit_in_net_worth: bool = False

    def to_domain(self) -> Settings:
        return Settings(**self.model_dump())


class FinanceDataSchema(_CamelModel):
    """Whole persisted document.

    ``netWorthHistory`` may be missing in documents written before history
    tracking existed; it then loads as an empty list.
    """

    assets: list[AssetSchema]
    liabilities: list[LiabilitySchema]
    credit_cards: list[CreditCardSchema]
    transactions: list[TransactionSchema]
    settings: SettingsSchema
    net_worth_history: list[NetWorthSnapshotSchema] = Field(
        default_factory=list
    )

    def to_domain(self) -> FinanceData:
        return FinanceData(
            assets=tuple(item.to_domain() for item in self.assets),
            liabilities=tuple(item.to_domain() for item in self.liabilities),
            credit_cards=tuple(item.to_domain() for item in self.credit_cards),
            transactions=tuple(
                item.to_domain() for item in self.transactions
            ),
            settings=self.settings.to_domain(),
            net_worth_history=tuple(
                item.to_domain() for item in self.net_worth_history
            ),
        )

    @classmethod
    def from_domain(cls, data: FinanceData) -> "FinanceDataSchema":
        return cls.model_validate(asdict(data))


def decode_finance_data(raw: str | bytes) -> FinanceData:
    """Parse a JSON document into finance data.

    Args:
        raw: JSON text.

    Returns:
        FinanceData: Parsed finance data.

    Raises:
        MalformedImportError: If the text is not JSON or not shaped like
            finance data.
    """
    try:
        payload = json.loads(raw, parse_float=Decimal)
    except (TypeError, ValueError) as exc:
        raise MalformedImportError(f"Invalid JSON: {exc}") from exc
    return finance_data_from_dict(payload)


def finance_data_from_dict(payload: Any) -> FinanceData:
    """Validate a decoded JSON object and convert it to finance data.

    Raises:
        MalformedImportError: If the payload does not match the document
            shape.
    """
    if not isinstance(payload, dict):
        raise MalformedImportError("Finance data must be a JSON object")
    try:
        return FinanceDataSchema.model_validate(payload).to_domain()
    except ValidationError as exc:
        raise MalformedImportError(
            f"Invalid finance data: {exc.error_count()} validation error(s)\n"
            f"{exc}"
        ) from exc


def finance_data_to_dict(data: FinanceData) -> dict[str, Any]:
    """Convert finance data to a JSON-ready dict with camelCase keys.

    Unset optional fields are omitted.
    """
    dumped = FinanceDataSchema.from_domain(data).model_dump(
        by_alias=True,
        exclude_none=True,
    )
    return _to_json_values(dumped)


def encode_finance_data(data: FinanceData, *, indent: int | None = None) -> str:
    """Serialize finance data to JSON text."""
    return json.dumps(finance_data_to_dict(data), indent=indent)


def _to_json_values(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _to_json_values(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_values(item) for item in value]
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Enum):
        return value.value
    return value


__all__ = [
    "FinanceDataSchema",
    "decode_finance_data",
    "encode_finance_data",
    "finance_data_from_dict",
    "finance_data_to_dict",
]
