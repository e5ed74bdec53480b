"""Remote data sources: NiceHash prices and WhatToMine coins and revenue."""
from apis.nicehash import NiceHashClient
from apis.whattomine import WhatToMineClient


def build_clients(config):
    """Construct both API clients from the loaded config."""
    nh_cfg = config.get("nicehash", {})
    wtm_cfg = config.get("whattomine", {})
    nicehash = NiceHashClient(
        base_url=nh_cfg.get("base_url", "https://api.nicehash.com"),
        timeout=nh_cfg.get("timeout", 30),
        cache_ttl=nh_cfg.get("cache_ttl", 0),
    )
    whattomine = WhatToMineClient(
        base_url=wtm_cfg.get("base_url", "https://whattomine.com"),
        user_agent=wtm_cfg.get("user_agent") or None,
        timeout=wtm_cfg.get("timeout", 30),
        revenue_cache_ttl=wtm_cfg.get("revenue_cache_ttl", 3600),
    )
    return nicehash, whattomine
