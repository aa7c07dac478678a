"""
Tire catalog parser package.

Exports:
- Category, TireRecord: dataclasses for a catalog section and a parsed product row
- TiresParser: concurrent category crawler with studded-tire cross-reference
- run_parsing: high-level function to parse categories and save Excel files
"""

from .types import Category, TireRecord
from .crawler import TiresParser
from .cli import run_parsing

__all__ = ["Category", "TireRecord", "TiresParser", "run_parsing"]
