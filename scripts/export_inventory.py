import argparse
import logging
import sys

from stockroom.core.logging import setup_logging
from stockroom.database import engine, init_db, session_scope
from stockroom.services.report_service import export_inventory_csv

logger = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Export the inventory as CSV.")
    parser.add_argument(
        "--output",
        default="-",
        help="Destination file (default: stdout).",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    init_db(engine)

    with session_scope() as db:
        if args.output == "-":
            count = export_inventory_csv(db, sys.stdout)
        else:
            with open(args.output, "w", newline="", encoding="utf-8") as handle:
                count = export_inventory_csv(db, handle)

    logger.info("Exported %d item(s) to %s", count, args.output)


if __name__ == "__main__":
    main()
