"""CLI adapter exporting the finance data to a dated JSON file."""

from finance_tracker.application.use_cases.import_export import (
    ExportFinanceDataUseCase,
)
from finance_tracker.infrastructure.container import (
    build_clock,
    build_finance_store,
    build_notifier,
)
from finance_tracker.infrastructure.settings import TrackerSettings


def main() -> None:
    """Write the export file into the configured export directory."""
    settings = TrackerSettings.from_env()
    store = build_finance_store(settings)
    use_case = ExportFinanceDataUseCase(
        store,
        build_clock(),
        notifier=build_notifier(),
    )

    result = use_case.execute()
    settings.export_dir.mkdir(parents=True, exist_ok=True)
    target = settings.export_dir / result.filename
    target.write_text(result.content, encoding="utf-8")
    print(f"Exported finance data to {target}.")


if __name__ == "__main__":  # pragma: no cover
    main()
