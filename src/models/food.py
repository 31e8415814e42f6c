"""
Food data models.

Represents catalogue items and the (rating, food) entries that rank them
inside a cuisine.
"""

from dataclasses import dataclass
from typing import Tuple


def _is_rating(value) -> bool:
    # bool is an int subclass but never a valid rating
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class FoodItem:
    """
    A single catalogue entry.
    The cuisine is fixed for the lifetime of the item; only the rating changes.
    """
    name: str  # Unique food name (e.g., "sushi")
    cuisine: str  # Category the food is ranked in (e.g., "japanese")
    rating: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Invalid food name: {self.name!r}")
        if not isinstance(self.cuisine, str) or not self.cuisine:
            raise ValueError(f"Invalid cuisine for {self.name!r}: {self.cuisine!r}")
        if not _is_rating(self.rating):
            raise ValueError(f"Invalid rating for {self.name!r}: {self.rating!r}. Must be an integer")

    @classmethod
    def from_dict(cls, data: dict) -> "FoodItem":
        """Create FoodItem from a catalogue record."""
        return cls(
            name=data["food"],
            cuisine=data["cuisine"],
            rating=data["rating"]
        )


@dataclass(frozen=True)
class RankingEntry:
    """
    Position of a food inside its cuisine's ranking.

    Entries order by rating descending, then food name ascending, so the
    smallest entry is the cuisine's highest rated food.
    """
    rating: int
    food: str

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (-self.rating, self.food)

    def __lt__(self, other: "RankingEntry") -> bool:
        return self.sort_key < other.sort_key
