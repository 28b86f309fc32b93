"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from finance_tracker.domain.models import CreditCard


def validate_asset_value(name: str, value: Decimal, logger: Logger) -> None:
    """Warn when an asset carries a negative value.

    Args:
        name: Asset name used in the message.
        value: Asset value.
        logger: Logger used for warnings.
    """
    if value < 0:
        logger.warning(f"Asset value is negative for asset={name}: {value}")


def validate_credit_card(card: CreditCard, logger: Logger) -> None:
    """Warn when a card's debt exceeds its limit.

    Debt above the limit is allowed; it only shows up as negative
    available credit.

    Args:
        card: Credit card to check.
        logger: Logger used for warnings.
    """
    if card.outstanding_debt > card.credit_limit:
        logger.warning(
            f"Credit card debt exceeds limit for card={card.name}: "
            f"debt={card.outstanding_debt}, limit={card.credit_limit}"
        )


__all__ = ["validate_asset_value", "validate_credit_card"]
