"""Shared test fixtures."""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.options import CalculatorOptions
from models.catalog import Algorithm, Coin
from fakes import SCRYPT, SHA256


@pytest.fixture
def catalog():
    """BTC, BCH on SHA256 and LTC, DOGE on Scrypt, interleaved."""
    return [
        Coin("Bitcoin", ("BTC", "Bitcoin", "btc", "bitcoin"), SHA256, 1),
        Coin("Litecoin", ("LTC", "Litecoin", "ltc", "litecoin"), SCRYPT, 4),
        Coin("BitcoinCash", ("BCH", "BitcoinCash", "bch", "bitcoincash"), SHA256, 193),
        Coin("Dogecoin", ("DOGE", "Dogecoin", "doge", "dogecoin"), SCRYPT, 6),
    ]


@pytest.fixture
def two_coin_catalog():
    """BTC on algorithm A (index 0) and LTC on algorithm B (index 1)."""
    algo_a = Algorithm(0, "A", ("A",))
    algo_b = Algorithm(1, "B", ("B",))
    return [
        Coin("Bitcoin", ("BTC",), algo_a, 1),
        Coin("Litecoin", ("LTC",), algo_b, 4),
    ]


@pytest.fixture
def options():
    return CalculatorOptions(sleep_time=0.5, use_revenue_cache=False)
