"""Per-run result dataclasses."""
from dataclasses import dataclass, field

from models.catalog import Coin


@dataclass
class RevenueEstimate:
    revenue: float = 0.0  # BTC/day for one marketplace unit of hashing power
    payload: dict = field(default_factory=dict)


@dataclass
class CoinData:
    coin: Coin
    revenue: RevenueEstimate
    price: float
    profit: float
    return_on_investment: float
    percent_change: float

    def to_dict(self):
        """Flatten into JSON-friendly primitives."""
        return {
            "coin": self.coin.display_name,
            "ticker": self.coin.ticker,
            "algorithm": self.coin.algorithm.display_name,
            "unit": self.coin.algorithm.unit,
            "revenue": self.revenue.revenue,
            "price": self.price,
            "profit": self.profit,
            "return_on_investment": self.return_on_investment,
            "percent_change": self.percent_change,
        }
