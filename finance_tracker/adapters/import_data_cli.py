"""CLI adapter importing a finance data JSON file."""

import argparse
from pathlib import Path

from finance_tracker.application.use_cases.import_export import (
    ImportFinanceDataUseCase,
)
from finance_tracker.domain.errors import MalformedImportError
from finance_tracker.infrastructure.container import (
    build_finance_store,
    build_notifier,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


def main(argv: list[str] | None = None) -> None:
    """Replace the stored data with the content of a JSON file."""
    parser = argparse.ArgumentParser(
        description="Import a finance data JSON document.",
    )
    parser.add_argument("file", type=Path, help="JSON file to import.")
    args = parser.parse_args(argv)

    logger = get_app_logger()
    try:
        raw = args.file.read_bytes()
    except OSError as exc:
        logger.error(f"Cannot read {args.file}: {exc}")
        print(f"Cannot read {args.file}.")
        return

    store = build_finance_store()
    use_case = ImportFinanceDataUseCase(
        store,
        notifier=build_notifier(),
        logger=logger,
    )
    try:
        data = use_case.execute(raw)
    except MalformedImportError:
        print("Import failed: invalid data format.")
        return
    print(
        f"Imported {len(data.assets)} assets, "
        f"{len(data.liabilities)} liabilities, "
        f"{len(data.credit_cards)} credit cards and "
        f"{len(data.transactions)} transactions."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
