"""
Operation data model.

One call of a replay script: the constructor, a rating update or a query.
"""

from dataclasses import dataclass, field
from typing import Any, List

CONSTRUCT = "FoodRatings"
CHANGE_RATING = "changeRating"
HIGHEST_RATED = "highestRated"

# Operation name -> number of arguments
OPERATION_ARITY = {
    CONSTRUCT: 3,
    CHANGE_RATING: 2,
    HIGHEST_RATED: 1,
}


@dataclass
class Operation:
    """A single call against the rating index."""
    name: str
    args: List[Any] = field(default_factory=list)

    def __post_init__(self):
        if self.name not in OPERATION_ARITY:
            raise ValueError(
                f"Invalid operation: {self.name}. "
                f"Must be one of {', '.join(OPERATION_ARITY)}"
            )
        expected = OPERATION_ARITY[self.name]
        if len(self.args) != expected:
            raise ValueError(
                f"{self.name} expects {expected} arguments, got {len(self.args)}"
            )
