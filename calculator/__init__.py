"""Coin selection, price resolution and the profit calculation loop."""
from calculator.errors import CalculatorError, MissingPriceError, PriceUnavailableError
from calculator.coin_filter import filter_coins
from calculator.pricing import GlobalPriceResolver, MinimumPriceResolver, build_price_resolver
from calculator.engine import ProfitCalculator, compute_coin_data
