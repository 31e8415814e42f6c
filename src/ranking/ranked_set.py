"""
Ranked Set - ordered collection of ranking entries for one cuisine.

Indexed binary heap: the heap keeps the best entry at the root and a
food -> position map locates any entry for O(log n) removal.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Union

from src.models.food import RankingEntry


class RankedSet:
    """
    Ordered set of (rating, food) entries, at most one per food.

    Supports:
    - add / discard / remove in O(log n)
    - first() (highest rating, smallest name on ties) in O(1)
    - lookup of a food's current entry in O(1)
    """

    def __init__(self, entries: Iterable[RankingEntry] = ()):
        self._heap: List[RankingEntry] = []
        self._position: Dict[str, int] = {}  # food -> index in _heap

        for entry in entries:
            self.add(entry)

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, item: Union[RankingEntry, str]) -> bool:
        if isinstance(item, RankingEntry):
            return self.get(item.food) == item
        return item in self._position

    def __iter__(self) -> Iterator[RankingEntry]:
        """Iterate entries in rank order (best first)."""
        return iter(sorted(self._heap))

    def __repr__(self) -> str:
        return f"RankedSet({list(self)!r})"

    def get(self, food: str) -> Optional[RankingEntry]:
        """Return the entry currently held for food, or None."""
        idx = self._position.get(food)
        if idx is None:
            return None
        return self._heap[idx]

    def first(self) -> RankingEntry:
        """
        Return the best entry without removing it.

        Raises:
            IndexError: If the set is empty
        """
        if not self._heap:
            raise IndexError("RankedSet is empty")
        return self._heap[0]

    def add(self, entry: RankingEntry) -> None:
        """
        Insert a new entry.

        Raises:
            ValueError: If the food already has an entry in this set
        """
        if entry.food in self._position:
            raise ValueError(f"Food '{entry.food}' is already ranked")

        self._heap.append(entry)
        self._position[entry.food] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def discard(self, entry: RankingEntry) -> bool:
        """
        Remove entry if this exact (rating, food) pair is present.

        Returns:
            True if an entry was removed
        """
        idx = self._position.get(entry.food)
        if idx is None or self._heap[idx] != entry:
            return False
        self._remove_at(idx)
        return True

    def remove(self, entry: RankingEntry) -> None:
        """
        Remove an exact (rating, food) pair.

        Raises:
            ValueError: If the pair is not present
        """
        if not self.discard(entry):
            raise ValueError(f"Entry not found: ({entry.rating}, '{entry.food}')")

    def _remove_at(self, idx: int) -> None:
        removed = self._heap[idx]
        del self._position[removed.food]

        last = self._heap.pop()
        if idx == len(self._heap):
            return

        self._heap[idx] = last
        self._position[last.food] = idx
        # The moved entry may belong above or below its new slot
        self._sift_down(idx)
        self._sift_up(idx)

    def _swap(self, i: int, j: int) -> None:
        self._position[self._heap[i].food] = j
        self._position[self._heap[j].food] = i
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._heap[i] < self._heap[parent]:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * i + 1
            right = 2 * i + 2
            best = i

            if left < size and self._heap[left] < self._heap[best]:
                best = left
            if right < size and self._heap[right] < self._heap[best]:
                best = right

            if best == i:
                break
            self._swap(i, best)
            i = best
