"""
Rating Index - per-cuisine rankings of foods under rating updates.

Keeps three views in step:
- cuisine -> RankedSet of (rating, food) entries
- food -> cuisine
- food -> current rating
"""

import logging
import threading
from collections.abc import Sequence as SequenceABC
from typing import Dict, Iterable, List, Sequence

from src.models.food import FoodItem, RankingEntry
from src.ranking.ranked_set import RankedSet

logger = logging.getLogger(__name__)


class RatingIndex:
    """
    Dynamic rating index over a fixed catalogue of foods.

    Every food has exactly one ranking entry, in its own cuisine, and that
    entry always carries the food's current rating. All public methods hold
    a single lock so a rating update is never observed half-applied.
    """

    def __init__(
        self,
        foods: Sequence[str],
        cuisines: Sequence[str],
        ratings: Sequence[int]
    ):
        """
        Build the index from parallel sequences.

        Args:
            foods: Unique food names
            cuisines: Cuisine of each food
            ratings: Initial rating of each food

        Raises:
            ValueError: If the sequences differ in length, a food name repeats,
                or any entry is malformed
        """
        for label, values in (("foods", foods), ("cuisines", cuisines), ("ratings", ratings)):
            if not isinstance(values, SequenceABC) or isinstance(values, str):
                raise ValueError(f"{label} must be a sequence, got {type(values).__name__}")

        if not (len(foods) == len(cuisines) == len(ratings)):
            raise ValueError(
                f"Length mismatch: {len(foods)} foods, "
                f"{len(cuisines)} cuisines, {len(ratings)} ratings"
            )

        items = [
            FoodItem(name=food, cuisine=cuisine, rating=rating)
            for food, cuisine, rating in zip(foods, cuisines, ratings)
        ]

        self._lock = threading.RLock()
        self.rankings: Dict[str, RankedSet] = {}  # cuisine -> RankedSet
        self.food_cuisine: Dict[str, str] = {}  # food -> cuisine
        self.food_rating: Dict[str, int] = {}  # food -> rating

        for item in items:
            if item.name in self.food_cuisine:
                raise ValueError(f"Food '{item.name}' already exists")
            self.food_cuisine[item.name] = item.cuisine
            self.food_rating[item.name] = item.rating

        for item in items:
            if item.cuisine not in self.rankings:
                self.rankings[item.cuisine] = RankedSet()
            self.rankings[item.cuisine].add(RankingEntry(item.rating, item.name))

        logger.info(
            f"Built rating index: {len(self.food_cuisine)} foods "
            f"across {len(self.rankings)} cuisines"
        )

    @classmethod
    def from_items(cls, items: Iterable[FoodItem]) -> "RatingIndex":
        """Build an index from FoodItem records."""
        items = list(items)
        return cls(
            foods=[item.name for item in items],
            cuisines=[item.cuisine for item in items],
            ratings=[item.rating for item in items]
        )

    def __len__(self) -> int:
        return len(self.food_cuisine)

    def __contains__(self, food: str) -> bool:
        return food in self.food_cuisine

    def change_rating(self, food: str, new_rating: int) -> None:
        """
        Replace a food's rating and re-rank it inside its cuisine.

        Args:
            food: Existing food name
            new_rating: Rating to store

        Raises:
            ValueError: If food is unknown or new_rating is not an integer
        """
        if not isinstance(new_rating, int) or isinstance(new_rating, bool):
            raise ValueError(f"Invalid rating for '{food}': {new_rating!r}. Must be an integer")

        with self._lock:
            cuisine = self._require_food(food)
            old_rating = self.food_rating[food]

            ranking = self.rankings[cuisine]
            ranking.remove(RankingEntry(old_rating, food))
            ranking.add(RankingEntry(new_rating, food))
            self.food_rating[food] = new_rating

        logger.debug(f"Changed rating of '{food}' ({cuisine}): {old_rating} -> {new_rating}")

    def highest_rated(self, cuisine: str) -> str:
        """
        Return the highest rated food in a cuisine.
        Ties go to the lexicographically smallest name.

        Raises:
            ValueError: If cuisine is unknown
        """
        with self._lock:
            return self._require_cuisine(cuisine).first().food

    def get_item(self, food: str) -> FoodItem:
        """Return a snapshot of a food's current state."""
        with self._lock:
            cuisine = self._require_food(food)
            return FoodItem(name=food, cuisine=cuisine, rating=self.food_rating[food])

    def get_rating(self, food: str) -> int:
        return self.get_item(food).rating

    def get_cuisine(self, food: str) -> str:
        return self.get_item(food).cuisine

    def cuisines(self) -> List[str]:
        """Return all cuisine names, sorted."""
        with self._lock:
            return sorted(self.rankings)

    def ranking(self, cuisine: str) -> List[RankingEntry]:
        """Return a cuisine's entries in rank order (best first)."""
        with self._lock:
            return list(self._require_cuisine(cuisine))

    def get_all_items(self) -> List[FoodItem]:
        """Return all foods grouped by cuisine, each group in rank order."""
        with self._lock:
            return [
                FoodItem(name=entry.food, cuisine=cuisine, rating=entry.rating)
                for cuisine in sorted(self.rankings)
                for entry in self.rankings[cuisine]
            ]

    def _require_food(self, food: str) -> str:
        cuisine = self.food_cuisine.get(food) if isinstance(food, str) else None
        if cuisine is None:
            logger.warning(f"Rejected lookup of unknown food '{food}'")
            raise ValueError(f"Food not found: {food}")
        return cuisine

    def _require_cuisine(self, cuisine: str) -> RankedSet:
        ranking = self.rankings.get(cuisine) if isinstance(cuisine, str) else None
        if ranking is None:
            logger.warning(f"Rejected lookup of unknown cuisine '{cuisine}'")
            raise ValueError(f"Cuisine not found: {cuisine}")
        return ranking
