from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Category:
    url: str
    name: str


@dataclass
class TireRecord:
    name: str
    price: float
    year: Optional[int] = None
    quantity: int = 8
    country: str = ""
