"""Use case to compute the asset category breakdown."""

from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.models import AssetCategoryBreakdown
from finance_tracker.domain.services.aggregation import (
    compute_asset_category_breakdown,
)


class GetAssetCategoryBreakdownUseCase:
    """Aggregate asset values by category."""

    def __init__(self, store: FinanceStore) -> None:
        self._store = store

    def execute(self) -> AssetCategoryBreakdown:
        data = self._store.data
        return compute_asset_category_breakdown(
            data.assets,
            currency_code=data.settings.currency,
        )


__all__ = ["GetAssetCategoryBreakdownUseCase", "AssetCategoryBreakdown"]
