"""
Cuisine Leaderboard.

Flattens the per-cuisine rankings of a RatingIndex into a table.
"""

import logging
from typing import Optional

import pandas as pd

from src.ranking.rating_index import RatingIndex

logger = logging.getLogger(__name__)

LEADERBOARD_COLUMNS = ["Cuisine", "Rank", "Food", "Rating"]


def build_leaderboard(index: RatingIndex, top_n: Optional[int] = None) -> pd.DataFrame:
    """
    Build a leaderboard table from the index's current rankings.

    Args:
        index: Rating index to read
        top_n: Keep only the first top_n foods of each cuisine (default: all)

    Returns:
        DataFrame with columns Cuisine, Rank, Food, Rating, sorted by cuisine
        then rank. Rank 1 is the food highest_rated() returns.
    """
    if top_n is not None and top_n < 1:
        raise ValueError(f"top_n must be positive, got {top_n}")

    rows = []
    for cuisine in index.cuisines():
        ranking = index.ranking(cuisine)
        if top_n is not None:
            ranking = ranking[:top_n]

        for rank, entry in enumerate(ranking, start=1):
            rows.append({
                "Cuisine": cuisine,
                "Rank": rank,
                "Food": entry.food,
                "Rating": entry.rating
            })

    df = pd.DataFrame(rows, columns=LEADERBOARD_COLUMNS)

    logger.info(
        f"Built leaderboard: {len(df)} rows across {df['Cuisine'].nunique()} cuisines"
    )
    return df
