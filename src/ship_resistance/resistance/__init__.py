"""Resistance layer: strategy interface and prediction methods."""

from .strategy import ResistanceComponents, ResistanceStrategy
from .holtrop import HoltropMethod
from .lang_mao import LangMaoMethod

__all__ = [
    "ResistanceComponents",
    "ResistanceStrategy",
    "HoltropMethod",
    "LangMaoMethod",
]
