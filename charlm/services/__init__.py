"""
Character window language model services.
"""

from .char_data import CharData, CharDataList
from .corpus import CorpusError, load_corpus, train_from_file
from .language_model import (
    LanguageModel,
    ModelStats,
    RandomSource,
    sample_char,
    train_from_text,
)

__all__ = [
    "CharData",
    "CharDataList",
    "CorpusError",
    "LanguageModel",
    "ModelStats",
    "RandomSource",
    "load_corpus",
    "sample_char",
    "train_from_file",
    "train_from_text",
]
