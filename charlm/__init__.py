"""
Character-level sliding window language model service.
"""

__version__ = "1.0.0"
