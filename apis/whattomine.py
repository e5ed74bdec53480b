"""WhatToMine API client for the coin catalog and per-coin revenue estimates."""
import logging
from models.catalog import Coin
from models.records import RevenueEstimate
from utils.cache import TTLCache
from utils.constants import ALGORITHMS, NICEHASH_TAG, find_algorithm
from utils.http_client import HTTPClient, APIError

logger = logging.getLogger("hashcalc.whattomine")


class WhatToMineClient:
    def __init__(self, base_url="https://whattomine.com", user_agent=None, timeout=30,
                 revenue_cache_ttl=3600):
        self.client = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            user_agent=user_agent,
            source="whattomine",
        )
        self.revenue_cache = TTLCache(default_ttl=revenue_cache_ttl)

    def set_user_agent(self, user_agent):
        self.client.set_user_agent(user_agent)

    def get_coins(self):
        """All coins WhatToMine lists whose algorithm can be rented on NiceHash, in response order."""
        data = self.client.get("/coins.json")
        coins = []
        for name, entry in data.get("coins", {}).items():
            tag = entry.get("tag", "")
            if tag == NICEHASH_TAG:
                continue
            algo = find_algorithm(entry.get("algorithm"))
            if algo is None:
                logger.debug(f"Skipping {name}: algorithm {entry.get('algorithm')!r} not sold on NiceHash")
                continue
            coins.append(Coin(
                display_name=name,
                names=_coin_names(tag, name),
                algorithm=algo,
                whattomine_id=entry.get("id"),
            ))
        logger.debug(f"Catalog has {len(coins)} coins")
        return coins

    def populate_cache(self):
        """Fetch revenue for every coin in one request, scaled to one NiceHash unit per algorithm."""
        params = {}
        for algo in ALGORITHMS:
            if algo.whattomine_key:
                params[algo.whattomine_key] = "true"
                params[f"factor[{algo.whattomine_key}_hr]"] = algo.whattomine_hashrate
        data = self.client.get("/coins.json", params=params)
        entries = {}
        for entry in data.get("coins", {}).values():
            if entry.get("id") is None or "btc_revenue" not in entry:
                continue
            entries[entry["id"]] = _parse_revenue(entry)
        self.revenue_cache.update(entries)
        logger.info(f"Cached revenue for {len(entries)} coins")
        return len(entries)

    def get_revenue(self, coin):
        """Revenue for one NiceHash unit of hashing power on this coin."""
        cached = self.revenue_cache.get(coin.whattomine_id)
        if cached is not None:
            logger.debug(f"Revenue for {coin.display_name} served from cache")
            return cached
        if coin.whattomine_id is None:
            raise APIError(f"{coin.display_name} has no WhatToMine id", source="whattomine")
        data = self.client.get(f"/coins/{coin.whattomine_id}.json", params={
            "hr": coin.algorithm.whattomine_hashrate,
            "p": 0,
            "fee": 0,
            "cost": 0,
            "hcost": 0,
        })
        if "btc_revenue" not in data:
            raise APIError(f"No revenue for {coin.display_name}", response_body=data, source="whattomine")
        return _parse_revenue(data)

    def close(self):
        self.client.close()


def _coin_names(tag, name):
    names = []
    for n in (tag, name, tag.lower(), name.lower()):
        if n and n not in names:
            names.append(n)
    return tuple(names)


def _parse_revenue(entry):
    return RevenueEstimate(revenue=float(entry["btc_revenue"]), payload=entry)
