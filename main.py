"""
FoodRatings - Cuisine Rating Index

CLI entry point for loading a catalogue, replaying rating updates and
exporting per-cuisine leaderboards.
"""

import argparse
import logging
import sys

from src.ranking.leaderboard import build_leaderboard
from src.ranking.rating_index import RatingIndex
from src.replay import ReplayOrchestrator
from src.utils.storage import StorageManager, load_catalog, load_operations
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="FoodRatings - Cuisine Rating Index",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Load a catalogue and print the best food of two cuisines
  python main.py --catalog data/catalog.csv --query japanese --query korean

  # Replay a call script and keep the per-call results
  python main.py --operations data/script.json

  # Apply updates on top of a catalogue, export the top 3 per cuisine
  python main.py --catalog data/catalog.csv \\
                 --operations data/updates.json \\
                 --top-n 3
        """
    )

    parser.add_argument(
        "--catalog",
        help="Food catalogue (.csv or .json) with food, cuisine and rating columns"
    )

    parser.add_argument(
        "--operations",
        help="JSON call script of FoodRatings / changeRating / highestRated calls"
    )

    parser.add_argument(
        "--query",
        action="append",
        default=[],
        metavar="CUISINE",
        help="Print the highest rated food of CUISINE (repeatable)"
    )

    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Foods per cuisine in the exported leaderboard (default: all)"
    )

    parser.add_argument(
        "--output-dir",
        default=str(settings.OUTPUT_ROOT),
        help=f"Output directory (default: {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--continue-on-failure",
        action="store_true",
        default=settings.CONTINUE_ON_OPERATION_FAILURE,
        help="Record failed calls as null and keep replaying"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.catalog and not args.operations:
        parser.error("nothing to do: pass --catalog and/or --operations")

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    print("=" * 60)
    print("FoodRatings - Cuisine Rating Index")
    print("=" * 60)
    if args.catalog:
        print(f"Catalogue: {args.catalog}")
    if args.operations:
        print(f"Operations: {args.operations}")
    print(f"Output: {args.output_dir}")
    print("=" * 60)
    print()

    try:
        storage = StorageManager(args.output_dir)
        index = None

        if args.catalog:
            index = RatingIndex.from_items(load_catalog(args.catalog))

        if args.operations:
            operations = load_operations(args.operations)
            orchestrator = ReplayOrchestrator(
                index=index,
                continue_on_failure=args.continue_on_failure
            )
            results = orchestrator.run(operations)
            index = orchestrator.index
            results_path = storage.save_results(operations, results)
            print(f"Results: {results_path}")
            if orchestrator.failures:
                print(f"⚠️  {len(orchestrator.failures)} operations failed")

        if index is None:
            logger.warning("No index was built; nothing to query or export")
            sys.exit(0)

        for cuisine in args.query:
            print(f"{cuisine}: {index.highest_rated(cuisine)}")

        leaderboard = build_leaderboard(index, top_n=args.top_n)
        leaderboard_path = storage.export_leaderboard(leaderboard)

        print()
        print("=" * 60)
        print("✅ Done")
        print("=" * 60)
        print(f"Foods: {len(index)} across {len(index.cuisines())} cuisines")
        print(f"Leaderboard: {leaderboard_path}")
        print("=" * 60)

        logger.info("FoodRatings completed successfully")
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Run interrupted by user")
        print("\n⚠️  Run interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Run failed: {e}", exc_info=True)
        print(f"\n❌ Run failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
