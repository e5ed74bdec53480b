"""Human-readable output, one block per coin."""
from rich.markup import escape

from output.base import OutputHandler
from utils.formatters import format_pct, format_price, format_profit


class PlainHandler(OutputHandler):
    def handle(self, data, calculator):
        coin = data.coin
        unit = coin.algorithm.unit
        profitable = data.profit >= 0
        color = "green" if profitable else "red"

        self.console.print(
            f"[bold]{escape(coin.display_name)}[/bold] ({escape(coin.ticker)}) "
            f"[dim]{escape(coin.algorithm.display_name)}[/dim]"
        )
        self.console.print(f"  Price:   {format_price(data.price, unit)}")
        self.console.print(f"  Revenue: {format_price(data.revenue.revenue, unit)}")
        self.console.print(
            f"  Profit:  [{color}]{format_profit(data.profit)}/{unit}/day[/{color}] "
            f"({format_pct(data.percent_change, with_color=True)})"
        )
        if calculator is not None and calculator.using_minimum_prices:
            self.console.print("  [dim]Price from lowest order with workers[/dim]")

    def finished(self, calculator):
        self.console.print("")
