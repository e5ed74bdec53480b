"""Utility modules for the hashing power calculator."""
from utils.logger import setup_logging
from utils.formatters import format_price, format_pct, format_profit
from utils.cache import TTLCache
from utils.http_client import HTTPClient, APIError
