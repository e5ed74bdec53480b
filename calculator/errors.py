"""Calculator error types."""


class CalculatorError(Exception):
    """Base class for errors that abort a calculation run."""


class MissingPriceError(CalculatorError):
    """The global price table has no entry for an algorithm."""
    def __init__(self, algorithm, table_size):
        super().__init__(
            f"No global price for {algorithm.display_name} (index {algorithm.index}, "
            f"table has {table_size} entries)"
        )
        self.algorithm = algorithm


class PriceUnavailableError(CalculatorError):
    """No active order with workers exists for an algorithm."""
    def __init__(self, algorithm):
        super().__init__(f"No active {algorithm.display_name} orders with workers")
        self.algorithm = algorithm
