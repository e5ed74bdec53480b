"""NiceHash API client for global and per-order hashing power prices."""
import logging
from utils.http_client import HTTPClient, APIError
from calculator.errors import PriceUnavailableError

logger = logging.getLogger("hashcalc.nicehash")

STANDARD_ORDER = 0
LOCATION_EUROPE = 0


class NiceHashClient:
    def __init__(self, base_url="https://api.nicehash.com", timeout=30, cache_ttl=0):
        self.client = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            cache_ttl=cache_ttl,
            source="nicehash",
        )

    def _call(self, method, **params):
        data = self.client.get("/api", params={"method": method, **params})
        result = data.get("result") if isinstance(data, dict) else None
        if result is None:
            raise APIError(f"Malformed response to {method}", response_body=data, source="nicehash")
        if "error" in result:
            raise APIError(f"{method}: {result['error']}", response_body=data, source="nicehash")
        return result

    def get_global_prices(self):
        """Current global price for every algorithm, indexed by algorithm number.

        Slots for algorithms the API did not report are None.
        """
        stats = self._call("stats.global.current").get("stats", [])
        if not stats:
            return []
        prices = [None] * (max(int(s["algo"]) for s in stats) + 1)
        for s in stats:
            prices[int(s["algo"])] = float(s["price"])
        logger.debug(f"Fetched global prices for {len(stats)} algorithms")
        return prices

    def get_orders(self, algorithm, location=LOCATION_EUROPE):
        return self._call("orders.get", location=location, algo=algorithm.index).get("orders", [])

    def get_algo_minimum_price(self, algorithm):
        """Price of the cheapest live standard order that has at least one worker."""
        prices = [
            float(o["price"])
            for o in self.get_orders(algorithm)
            if o.get("workers", 0) > 0 and o.get("alive", True) and o.get("type", STANDARD_ORDER) == STANDARD_ORDER
        ]
        if not prices:
            raise PriceUnavailableError(algorithm)
        price = min(prices)
        logger.debug(f"Minimum {algorithm.display_name} price: {price} ({len(prices)} orders with workers)")
        return price

    def close(self):
        self.client.close()
