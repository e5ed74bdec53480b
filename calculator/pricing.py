"""Price resolution strategies, chosen once per run."""
import logging
from calculator.errors import MissingPriceError

logger = logging.getLogger("hashcalc.pricing")


class PriceResolver:
    """Returns the NiceHash price (BTC per unit per day) for an algorithm."""

    uses_minimum_prices = False

    def price_for(self, algorithm):
        raise NotImplementedError


class GlobalPriceResolver(PriceResolver):
    """Looks prices up in a table fetched once at the start of the run."""

    def __init__(self, prices):
        self.prices = tuple(prices)

    def price_for(self, algorithm):
        index = algorithm.index
        if index < 0 or index >= len(self.prices) or self.prices[index] is None:
            raise MissingPriceError(algorithm, len(self.prices))
        return self.prices[index]


class MinimumPriceResolver(PriceResolver):
    """Asks NiceHash for the cheapest order with workers on every call."""

    uses_minimum_prices = True

    def __init__(self, nicehash):
        self.nicehash = nicehash

    def price_for(self, algorithm):
        return self.nicehash.get_algo_minimum_price(algorithm)


def build_price_resolver(use_minimum_prices, nicehash):
    if use_minimum_prices:
        return MinimumPriceResolver(nicehash)
    prices = nicehash.get_global_prices()
    logger.debug(f"Global price table has {len(prices)} slots")
    return GlobalPriceResolver(prices)
