"""Net worth inclusion policy."""

from decimal import Decimal


def compute_net_worth(
    total_assets: Decimal,
    total_liabilities: Decimal,
    total_credit_debt: Decimal,
    available_credit: Decimal,
    *,
    include_credit: bool,
) -> Decimal:
    """Apply the net worth formula.

    Credit card debt always reduces net worth. Available credit is only
    added when ``include_credit`` is set.

    Args:
        total_assets: Sum of asset values.
        total_liabilities: Sum of liability values.
        total_credit_debt: Sum of credit card debts.
        available_credit: Total credit limit minus total credit debt.
        include_credit: Whether available credit counts toward net worth.

    Returns:
        Decimal: Net worth.
    """
    net_worth = total_assets - total_liabilities - total_credit_debt
    if include_credit:
        net_worth += available_credit
    return net_worth


__all__ = ["compute_net_worth"]
