"""
Corpus loading.

Reads a training file into a single string before the model scans it.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .language_model import LanguageModel

logger = logging.getLogger(__name__)


class CorpusError(ValueError):
    """Raised when a corpus file cannot be read."""


def load_corpus(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read the whole corpus file.

    Args:
        path: Path to a text file
        encoding: Text encoding of the file

    Returns:
        File contents as one string
    """
    path = Path(path)
    if not path.is_file():
        raise CorpusError(f"corpus file not found: {path}")

    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise CorpusError(f"cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise CorpusError(f"cannot read {path}: {e}") from e

    logger.info(f"[Corpus] Loaded {len(text)} chars from {path}")
    return text


def train_from_file(
    path: Union[str, Path],
    window_length: int,
    seed: Optional[int] = None,
    encoding: str = "utf-8",
) -> LanguageModel:
    """Build a model from the text in the given file."""
    model = LanguageModel(window_length, seed=seed)
    model.train(load_corpus(path, encoding=encoding))
    return model
