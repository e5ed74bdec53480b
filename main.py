#!/usr/bin/env python3
"""NiceHash Profitability Calculator - CLI Entry Point."""
import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import click
from rich.console import Console

from __version__ import __version__

console = Console()
logger = logging.getLogger("hashcalc")

BUG_REPORTS = "https://github.com/GarboMuffin/nicehash-calculator/issues/new"


def _print_header():
    from utils.constants import DISCLAIMER
    console.print(DISCLAIMER)
    console.print("")
    console.print(f"Please report bugs: [underline]{BUG_REPORTS}[/underline]")
    console.print("")


def _parse_file_arguments(file_args):
    """Parse arguments file lines with the same options as the command line."""
    if not file_args:
        return {}
    ctx = cli.make_context("hashcalc", list(file_args), resilient_parsing=True)
    return ctx.params


def _merge_params(cli_params, file_params):
    """Command line values win; flags set in either place are on; terms are concatenated."""
    merged = dict(cli_params)
    for key, value in file_params.items():
        if key == "terms":
            merged["terms"] = tuple(cli_params.get("terms") or ()) + tuple(value or ())
        elif isinstance(value, bool):
            merged[key] = bool(cli_params.get(key)) or value
        elif merged.get(key) is None:
            merged[key] = value
    return merged


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("terms", nargs=-1, type=click.UNPROCESSED)
@click.option("--config", "config_path", default=None, help="Path to config YAML")
@click.option("--arguments-file", default=None,
              help="File with one extra argument per line (default: arguments.txt)")
@click.option("--min", "use_minimum_prices", is_flag=True,
              help="Price with the lowest order with workers instead of the global price (slow, discouraged)")
@click.option("--no-cache", is_flag=True, help="Fetch WhatToMine revenue coin by coin instead of in one request")
@click.option("--sleep-time", type=float, default=None, help="Seconds to wait between coins")
@click.option("--json", "use_json_output", is_flag=True, help="Output as JSON")
@click.option("--no-header", is_flag=True, help="Skip the disclaimer banner")
@click.option("--user-agent", default=None, help="User-Agent sent to WhatToMine")
@click.option("--continue-on-error", is_flag=True,
              help="Skip coins whose data cannot be fetched instead of stopping")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="hashcalc")
def cli(terms, config_path, arguments_file, use_minimum_prices, no_cache, sleep_time,
        use_json_output, no_header, user_agent, continue_on_error, debug):
    """NiceHash Profitability Calculator - estimate profit from renting hashing power.

    TERMS select coins: a ticker, coin name or algorithm enables it, a leading
    '-' disables it (e.g. "scrypt -DOGE").
    """
    from utils.logger import setup_logging
    from config import load_config
    from config.options import build_options, read_arguments_file
    from apis import build_clients
    from calculator import ProfitCalculator, CalculatorError
    from utils.http_client import APIError

    ctx = click.get_current_context()
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    args_path = arguments_file or config["calculator"].get("arguments_file", "arguments.txt")
    p = _merge_params(ctx.params, _parse_file_arguments(read_arguments_file(args_path)))

    setup_logging("DEBUG" if p["debug"] else config["logging"]["level"])

    options = build_options(config, p["terms"], overrides={
        "use_minimum_prices": True if p["use_minimum_prices"] else None,
        "use_revenue_cache": False if p["no_cache"] else None,
        "sleep_time": p["sleep_time"],
        "use_json_output": True if p["use_json_output"] else None,
        "show_header": False if p["no_header"] else None,
        "user_agent": p["user_agent"],
        "continue_on_error": True if p["continue_on_error"] else None,
        "debug": True if p["debug"] else None,
    })

    if options.show_header and not options.use_json_output:
        _print_header()

    for unrecognized in options.unrecognized:
        logger.warning(f"Unrecognized option: {unrecognized}")

    nicehash, whattomine = build_clients(config)
    if options.user_agent:
        whattomine.set_user_agent(options.user_agent)

    calculator = ProfitCalculator(options, nicehash, whattomine)
    try:
        calculator.start()
    except (APIError, CalculatorError) as e:
        console.print(f"[red]✗[/red] {e}", highlight=False)
        sys.exit(1)
    finally:
        nicehash.close()
        whattomine.close()


if __name__ == "__main__":
    cli()
