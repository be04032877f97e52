"""Stream normalization: wire adapter and event classifier."""

from .adapter import decode
from .classifier import START_ACTIVITIES, Classification, classify, classify_event

__all__ = ["decode", "classify", "classify_event", "Classification", "START_ACTIVITIES"]
