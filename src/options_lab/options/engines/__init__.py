"""Pricing engines used by the strategy and risk modules."""

from .base import GreeksModel, PriceModel
from .bs_pricer import BlackScholesPricer

__all__ = [
    "PriceModel",
    "GreeksModel",
    "BlackScholesPricer",
]
