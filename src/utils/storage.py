"""
Storage utility.

File I/O helpers for food catalogues, replay scripts, replay results and
leaderboard exports.
"""

import json
import os
import logging
from typing import Dict, List, Optional

import pandas as pd

from src.models.food import FoodItem
from src.models.operation import Operation
import config.settings as settings

logger = logging.getLogger(__name__)


def load_catalog(path: str) -> List[FoodItem]:
    """
    Load a food catalogue from CSV or JSON.

    The file must provide food, cuisine and rating columns (JSON: a list of
    records with those keys).

    Args:
        path: Path to a .csv or .json catalogue

    Returns:
        List of FoodItem in file order

    Raises:
        ValueError: If columns are missing or a row is malformed
    """
    # Names are read as text: "007" must not become 7 and "NA" must not become NaN
    try:
        if str(path).endswith(".json"):
            df = pd.read_json(path, orient="records", dtype=False)
        else:
            df = pd.read_csv(
                path,
                dtype={"food": str, "cuisine": str},
                keep_default_na=False
            )
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read catalogue {path}: {e}")
        raise

    missing = [col for col in settings.CATALOG_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Catalogue {path} is missing columns: {', '.join(missing)}")

    items = []
    for row_number, row in enumerate(df.to_dict(orient="records"), start=1):
        items.append(_row_to_item(row, row_number))

    logger.info(f"Loaded {len(items)} foods from {path}")
    return items


def _is_blank(value) -> bool:
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return False
    return value is None or bool(pd.isna(value))


def _row_to_item(row: Dict, row_number: int) -> FoodItem:
    food, cuisine, rating = row["food"], row["cuisine"], row["rating"]

    if _is_blank(food) or _is_blank(cuisine) or _is_blank(rating):
        raise ValueError(f"Catalogue row {row_number} has empty fields: {row}")

    try:
        numeric = float(rating)
    except (TypeError, ValueError):
        raise ValueError(f"Catalogue row {row_number} has a non-numeric rating: {rating!r}")
    if not numeric.is_integer():
        raise ValueError(f"Catalogue row {row_number} has a non-integer rating: {rating!r}")

    return FoodItem.from_dict({
        "food": str(food),
        "cuisine": str(cuisine),
        "rating": int(numeric)
    })


def load_operations(path: str) -> List[Operation]:
    """
    Load a replay script.

    Accepts either parallel arrays:
        {"operations": ["FoodRatings", "highestRated"], "arguments": [[...], ["korean"]]}
    or a list of records:
        [{"operation": "highestRated", "arguments": ["korean"]}]

    Raises:
        ValueError: If the script is malformed
    """
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load operations from {path}: {e}")
        raise ValueError(f"Unreadable operations file {path}: {e}") from e

    if isinstance(data, dict):
        names = data.get("operations", [])
        arguments = data.get("arguments", [])
        if len(names) != len(arguments):
            raise ValueError(
                f"Operations file {path}: {len(names)} operations "
                f"but {len(arguments)} argument lists"
            )
        operations = [Operation(name, list(args)) for name, args in zip(names, arguments)]
    elif isinstance(data, list):
        operations = [
            Operation(record.get("operation"), list(record.get("arguments", [])))
            for record in data
        ]
    else:
        raise ValueError(f"Operations file {path} must hold a JSON object or list")

    logger.info(f"Loaded {len(operations)} operations from {path}")
    return operations


class StorageManager:
    """
    Manages output files for replay runs.

    Handles:
    - Replay results (output/results.json)
    - Leaderboards (output/leaderboard.csv)
    """

    def __init__(self, output_dir: str):
        """
        Initialize storage manager.

        Args:
            output_dir: Directory for generated files (created if missing)
        """
        self.output_dir = str(output_dir)
        os.makedirs(self.output_dir, exist_ok=True)

        logger.info(f"Initialized StorageManager with output_dir={self.output_dir}")

    def save_results(
        self,
        operations: List[Operation],
        results: List[Optional[str]],
        filename: str = settings.RESULTS_FILENAME
    ) -> str:
        """
        Save replay results next to the calls that produced them.

        Returns:
            Path to the written JSON file
        """
        data = {
            "operations": [op.name for op in operations],
            "results": results
        }
        filepath = os.path.join(self.output_dir, filename)
        self._write_json_atomic(data, filepath)
        logger.info(f"Saved {len(results)} results to {filepath}")
        return filepath

    def export_leaderboard(
        self,
        leaderboard: pd.DataFrame,
        filename: str = settings.LEADERBOARD_FILENAME
    ) -> str:
        """
        Write a leaderboard table as CSV.

        Returns:
            Path to the written CSV file
        """
        filepath = os.path.join(self.output_dir, filename)
        try:
            leaderboard.to_csv(filepath, index=False)
        except OSError as e:
            logger.error(f"Failed to export leaderboard to {filepath}: {e}")
            raise

        logger.info(f"Leaderboard saved to {filepath} ({len(leaderboard)} rows)")
        return filepath

    def _write_json_atomic(self, data, filepath: str) -> None:
        temp_path = f"{filepath}.tmp"
        try:
            with open(temp_path, 'w') as f:
                json.dump(data, f, indent=2)
            os.replace(temp_path, filepath)
        except Exception as e:
            logger.error(f"Failed to write {filepath}: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise
