"""
Replay Orchestrator.

Applies a script of FoodRatings / changeRating / highestRated calls to a
rating index and collects the result of each call.
"""

import logging
from typing import List, Optional

from src.models.operation import Operation, CONSTRUCT, CHANGE_RATING, HIGHEST_RATED
from src.ranking.rating_index import RatingIndex
import config.settings as settings

logger = logging.getLogger(__name__)


class ReplayOrchestrator:
    """
    Drives a RatingIndex from a call script.

    A FoodRatings call (re)builds the index; changeRating and highestRated
    run against the current one. Results line up one-to-one with the
    script: None for the constructor and updates, a food name for queries.
    """

    def __init__(
        self,
        index: Optional[RatingIndex] = None,
        continue_on_failure: bool = settings.CONTINUE_ON_OPERATION_FAILURE
    ):
        """
        Initialize replay orchestrator.

        Args:
            index: Existing index to run against (e.g., loaded from a catalogue)
            continue_on_failure: Record None and keep going when a call fails
        """
        self.index = index
        self.continue_on_failure = continue_on_failure
        self.failures: List[int] = []  # Positions of failed calls

    def run(self, operations: List[Operation]) -> List[Optional[str]]:
        """
        Apply operations in order.

        Args:
            operations: Call script

        Returns:
            One result per operation

        Raises:
            ValueError: On the first failing call, unless continue_on_failure
        """
        logger.info(f"Replaying {len(operations)} operations")
        self.failures = []
        results: List[Optional[str]] = []

        for position, operation in enumerate(operations):
            try:
                results.append(self._apply(operation))
            except ValueError as e:
                logger.error(f"Operation {position} ({operation.name}) failed: {e}")
                if not self.continue_on_failure:
                    raise
                self.failures.append(position)
                results.append(None)

        logger.info(
            f"Replay complete: {len(results) - len(self.failures)} succeeded, "
            f"{len(self.failures)} failed"
        )
        return results

    def _apply(self, operation: Operation) -> Optional[str]:
        if operation.name == CONSTRUCT:
            foods, cuisines, ratings = operation.args
            self.index = RatingIndex(foods, cuisines, ratings)
            return None

        if self.index is None:
            raise ValueError(f"{operation.name} called before {CONSTRUCT}")

        if operation.name == CHANGE_RATING:
            food, new_rating = operation.args
            self.index.change_rating(food, new_rating)
            return None

        if operation.name == HIGHEST_RATED:
            (cuisine,) = operation.args
            return self.index.highest_rated(cuisine)

        raise ValueError(f"Unsupported operation: {operation.name}")
