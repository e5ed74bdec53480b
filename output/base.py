"""Output handler contract."""
from rich.console import Console


class OutputHandler:
    """Receives one CoinData per coin, in order, then a single finished() call."""

    def __init__(self, console=None):
        self.console = console or Console()

    def handle(self, data, calculator):
        raise NotImplementedError

    def finished(self, calculator):
        pass
