"""Catalog dataclasses: marketplace algorithms and the coins mined with them."""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Algorithm:
    index: int  # position in the marketplace's global price table
    display_name: str
    names: Tuple[str, ...] = ()
    unit: str = "TH"  # hashing unit the marketplace prices are quoted in
    whattomine_key: Optional[str] = None
    whattomine_hashrate: float = 1.0  # one marketplace unit in WhatToMine's hashrate unit

    def matches(self, name):
        return name in self.names


@dataclass(frozen=True, eq=False)
class Coin:
    display_name: str
    names: Tuple[str, ...]
    algorithm: Algorithm
    whattomine_id: Optional[int] = None

    @property
    def ticker(self):
        return self.names[0] if self.names else self.display_name

    def matches(self, name):
        """True if name is one of this coin's aliases or one of its algorithm's."""
        return name in self.names or self.algorithm.matches(name)

    def __repr__(self):
        return f"Coin({self.display_name!r}, algorithm={self.algorithm.display_name!r})"
