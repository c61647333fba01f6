"""
Character-level sliding window language model.

The model maps every window (a substring of fixed length) seen in the
training text to the distribution of the character that follows it, and
generates text by repeatedly sampling the next character for the trailing
window of what has been produced so far.

Generation is reproducible when the model is built with a seed.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Tuple

from .char_data import CharDataList

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that draws a uniform float in [0, 1)."""

    def random(self) -> float:
        ...


@dataclass
class ModelStats:
    """Statistics for a trained window model."""
    window_length: int = 0
    num_windows: int = 0
    num_observations: int = 0
    total_transitions: int = 0
    top_windows: List[Tuple[str, int]] = field(default_factory=list)


def sample_char(probs: CharDataList, r: float) -> str:
    """
    Map a uniform draw to a character using cumulative probabilities.

    Returns the first character whose cumulative probability is strictly
    greater than r. When rounding leaves the last cp just below r, the last
    character is returned.
    """
    for cd in probs:
        if cd.cp > r:
            return cd.chr
    return probs[len(probs) - 1].chr


class LanguageModel:
    """
    Window -> next character model.

    Build it once with train(), then call generate() as often as needed.
    Unseeded models produce different text on every run; seeded models
    produce the same text for the same corpus and arguments.
    """

    def __init__(
        self,
        window_length: int,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ):
        """
        Initialize an empty model.

        Args:
            window_length: Number of characters used to predict the next one
            seed: Seed for reproducible generation (None = unseeded)
            rng: Explicit random source; overrides seed when given
        """
        self.window_length = window_length
        self.seed = seed
        if rng is not None:
            self.random_generator: RandomSource = rng
        elif seed is not None:
            self.random_generator = random.Random(seed)
        else:
            self.random_generator = random.Random()

        self.char_data_map: Dict[str, CharDataList] = {}

    def train(self, text: str) -> "LanguageModel":
        """
        Scan the corpus and record which character follows each window.

        Args:
            text: Entire training corpus as one string
        """
        length = self.window_length
        if length <= 0:
            logger.warning(f"[CharLM] window_length={length}, nothing to train")
            return self

        for i in range(len(text) - length):
            key = text[i:i + length]
            nxt = text[i + length]

            probs = self.char_data_map.get(key)
            if probs is None:
                probs = CharDataList()
                self.char_data_map[key] = probs

            probs.update(nxt)

            self.calculate_probabilities(probs)

        logger.info(
            f"[CharLM] Trained on {len(text)} chars: "
            f"{len(self.char_data_map)} windows of length {length}"
        )
        return self

    def calculate_probabilities(self, probs: CharDataList) -> None:
        """Set p and cp of every entry from the counts, in list order."""
        total = probs.total()
        if total == 0:
            return

        cumulative = 0.0
        for cd in probs:
            cd.p = cd.count / total
            cumulative += cd.p
            cd.cp = cumulative

    def get_random_char(self, probs: CharDataList) -> str:
        """Draw a character from the distribution using the model's generator."""
        r = self.random_generator.random()
        return sample_char(probs, r)

    def generate(self, initial_text: str, text_length: int) -> str:
        """
        Extend initial_text one character at a time.

        Stops when text_length characters were produced or when the current
        window was never seen in training. Only the new characters are
        returned, so the result is empty if the seed window is unknown.

        Args:
            initial_text: Text to continue from
            text_length: Number of characters to generate

        Returns:
            Generated text (at most text_length characters)
        """
        if text_length <= 0 or self.window_length <= 0:
            return ""

        target = len(initial_text) + text_length
        text = initial_text
        while len(text) < target:
            window = text[max(0, len(text) - self.window_length):]
            probs = self.char_data_map.get(window)
            if probs is None:
                break
            text += self.get_random_char(probs)

        return text[len(initial_text):target]

    def get_probs(self, window: str) -> Optional[CharDataList]:
        """Distribution recorded for window, or None if it was never seen."""
        return self.char_data_map.get(window)

    def get_stats(self) -> ModelStats:
        """Get statistics about the model."""
        totals = [(key, probs.total()) for key, probs in self.char_data_map.items()]
        totals.sort(key=lambda x: x[1], reverse=True)

        return ModelStats(
            window_length=self.window_length,
            num_windows=len(self.char_data_map),
            num_observations=sum(len(p) for p in self.char_data_map.values()),
            total_transitions=sum(t for _, t in totals),
            top_windows=totals[:10],
        )

    def __str__(self) -> str:
        lines = [f"{key} : {probs}" for key, probs in self.char_data_map.items()]
        return "".join(line + "\n" for line in lines)


def train_from_text(text: str, window_length: int, seed: Optional[int] = None) -> LanguageModel:
    """Build and train a model from an in-memory corpus."""
    model = LanguageModel(window_length, seed=seed)
    model.train(text)
    return model
