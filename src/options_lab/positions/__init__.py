"""Recorded positions, book-level aggregation and display P&L simulation."""

from .book import PositionBook, expiry_urgency
from .jitter import PnlJitter
from .records import Position, open_position

__all__ = [
    "Position",
    "open_position",
    "PositionBook",
    "expiry_urgency",
    "PnlJitter",
]
