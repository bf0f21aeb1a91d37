"""Shared enums for models."""

from enum import Enum


class ResultOrder(str, Enum):
    """Ordering of aggregated vote tallies."""

    VOTES = "votes"  # most voted first, ties by name
    NAME = "name"  # alphabetical, for the print selection list
