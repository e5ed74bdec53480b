"""ProfitCalculator - sequential revenue vs. rental price calculation."""
import logging
import math
import time

from calculator.coin_filter import filter_coins
from calculator.errors import CalculatorError
from calculator.pricing import build_price_resolver
from models.records import CoinData
from output import choose_handler
from utils.http_client import APIError

logger = logging.getLogger("hashcalc.calculator")


def compute_coin_data(coin, revenue, price):
    """Derive profit and return figures for one coin. No rounding happens here."""
    profit = revenue.revenue - price
    return_on_investment = _ratio(revenue.revenue, price)
    return CoinData(
        coin=coin,
        revenue=revenue,
        price=price,
        profit=profit,
        return_on_investment=return_on_investment,
        percent_change=return_on_investment - 1,
    )


def _ratio(revenue, price):
    if price:
        return revenue / price
    # free hashing power: any revenue is an unbounded return
    if revenue > 0:
        return math.inf
    return math.nan


class ProfitCalculator:
    def __init__(self, options, nicehash, whattomine, handler=None, sleep=time.sleep):
        self.options = options
        self.nicehash = nicehash
        self.whattomine = whattomine
        self.handler = handler
        self.sleep = sleep

    @property
    def using_minimum_prices(self):
        return self.options.use_minimum_prices

    @property
    def in_debug_mode(self):
        return self.options.debug

    def start(self):
        """Fetch the catalog and prices, select coins, then run the calculation loop."""
        all_coins = self.whattomine.get_coins()
        resolver = build_price_resolver(self.options.use_minimum_prices, self.nicehash)

        if self.options.use_revenue_cache:
            self.whattomine.populate_cache()

        coins = filter_coins(all_coins, self.options.coins, log=logger)
        handler = self.handler or choose_handler(self.options.use_json_output)

        if resolver.uses_minimum_prices:
            logger.warning("Calculating prices using lowest order with workers. This is discouraged.")

        logger.debug(f"Calculating {len(coins)} of {len(all_coins)} coins")
        self.run(coins, resolver, handler)

    def run(self, coins, resolver, handler):
        """Handle each coin in order, pausing between coins, then signal completion once."""
        last = len(coins) - 1
        for index, coin in enumerate(coins):
            data = self._calculate(coin, resolver)
            if data is not None:
                handler.handle(data, self)

            if index < last:
                self.sleep(self.options.sleep_time)

        handler.finished(self)

    def _calculate(self, coin, resolver):
        try:
            revenue = self.whattomine.get_revenue(coin)
            price = resolver.price_for(coin.algorithm)
        except (APIError, CalculatorError) as e:
            if not self.options.continue_on_error:
                raise
            logger.error(f"Skipping {coin.display_name}: {e}")
            return None
        return compute_coin_data(coin, revenue, price)
