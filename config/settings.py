"""
Configuration settings for FoodRatings.

Centralized configuration for the rating index, replay driver and CLI.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Catalogue input
CATALOG_COLUMNS = ("food", "cuisine", "rating")

# Output files
RESULTS_FILENAME = "results.json"
LEADERBOARD_FILENAME = "leaderboard.csv"

# Replay driver
CONTINUE_ON_OPERATION_FAILURE = False  # Stop at the first failing call

# Logging
LOG_LEVEL = os.getenv("FOOD_RATINGS_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "food_ratings.log"
