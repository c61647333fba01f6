"""
Shared pytest fixtures for character window model tests.
"""
from pathlib import Path

import pytest


SAMPLE_CORPUS = (
    "the stars are bright tonight and the sky is clear. "
    "the stars shine over the sea and the sea is calm. "
    "the ship sails on the sea under the stars. "
)


class FixedRandom:
    """Random source returning a fixed sequence of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def sample_corpus() -> str:
    """Sample training text."""
    return SAMPLE_CORPUS


@pytest.fixture
def corpus_path(sample_corpus, tmp_path) -> Path:
    """Create a temporary corpus file."""
    file_path = tmp_path / "corpus.txt"
    file_path.write_text(sample_corpus, encoding="utf-8")
    return file_path


@pytest.fixture
def fixed_random():
    """Factory for deterministic random sources."""
    return FixedRandom
