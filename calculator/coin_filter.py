"""Coin selection from user terms.

A term is either an enable term ("BTC", "scrypt") or a disable term ("-BTC").
A term matches a coin when it equals one of the coin's aliases or one of its
algorithm's aliases, so naming an algorithm selects every coin mined with it.

With no enable matches the selection is the whole catalog minus disabled coins.
The first enable match switches to allow-list mode: the selection is reset and
only explicitly enabled coins are kept, still subject to later disable terms.
"""
import logging

logger = logging.getLogger("hashcalc.filter")

DISABLE_PREFIX = "-"


def parse_term(term):
    """Split a term into (name, is_disabling)."""
    if term.startswith(DISABLE_PREFIX):
        return term[len(DISABLE_PREFIX):], True
    return term, False


def filter_coins(all_coins, terms, log=None):
    """Reduce the catalog to the coins selected by terms, keeping catalog order."""
    log = log or logger
    catalog = tuple(all_coins)
    parsed = [(term,) + parse_term(term) for term in terms]

    result = list(catalog)
    user_enabled_coins = False

    for coin in catalog:
        enabled = False
        for term, name, is_disabling in parsed:
            if not coin.matches(name):
                continue

            if is_disabling:
                if coin in result:
                    log.debug(f"Disabling coin {coin.display_name} because of argument '{term}'")
                    result.remove(coin)
                else:
                    log.warning(f"Can't disable coin '{name}': not found")
            elif not enabled:
                log.debug(f"Enabled coin {coin.display_name} because of argument '{term}'")
                if not user_enabled_coins:
                    result = []
                    user_enabled_coins = True
                result.append(coin)
                enabled = True

    return result
