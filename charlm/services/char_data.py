"""
Observation records for the character window model.

CharData tracks one candidate next character for a window.
CharDataList keeps a window's observations in first-seen order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class CharData:
    """A character observed after a window, with its count and probabilities."""
    chr: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.chr} {self.count} {self.p} {self.cp})"


class CharDataList:
    """
    Ordered set of CharData keyed by character.

    New characters are appended at the end and the order is never changed,
    so cumulative probabilities walk the characters in the order they were
    first seen during training.
    """

    def __init__(self):
        self._items: List[CharData] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._items)

    def __getitem__(self, index: int) -> CharData:
        return self._items[index]

    def __str__(self) -> str:
        return "(" + " ".join(str(cd) for cd in self._items) + ")"

    def index_of(self, chr: str) -> int:
        """Position of chr in the list, or -1 if it was never added."""
        for i, cd in enumerate(self._items):
            if cd.chr == chr:
                return i
        return -1

    def get(self, chr: str) -> Optional[CharData]:
        index = self.index_of(chr)
        return self._items[index] if index != -1 else None

    def add(self, chr: str) -> CharData:
        """Append a new observation with count 1."""
        cd = CharData(chr)
        self._items.append(cd)
        return cd

    def update(self, chr: str) -> CharData:
        """Increment the count of chr, adding it if missing."""
        cd = self.get(chr)
        if cd is None:
            return self.add(chr)
        cd.count += 1
        return cd

    def to_array(self) -> List[CharData]:
        return list(self._items)

    def total(self) -> int:
        return sum(cd.count for cd in self._items)
