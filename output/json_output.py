"""Structured output: a single JSON array written once every coin is handled."""
import math
from output.base import OutputHandler


def _finite_or_none(value):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


class JSONHandler(OutputHandler):
    def __init__(self, console=None):
        super().__init__(console)
        self.records = []

    def handle(self, data, calculator):
        self.records.append({k: _finite_or_none(v) for k, v in data.to_dict().items()})

    def finished(self, calculator):
        self.console.print_json(data=self.records)
