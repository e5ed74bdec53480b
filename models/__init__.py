"""Data models."""
from models.catalog import Algorithm, Coin
from models.records import RevenueEstimate, CoinData
