"""Run options assembled from config, the arguments file and the command line."""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger("hashcalc.options")

COMMENT_PREFIX = "#"
OPTION_PREFIX = "--"


@dataclass
class CalculatorOptions:
    coins: List[str] = field(default_factory=list)
    use_minimum_prices: bool = False
    use_revenue_cache: bool = True
    sleep_time: float = 1.0
    use_json_output: bool = False
    show_header: bool = True
    debug: bool = False
    user_agent: str = ""
    continue_on_error: bool = False
    unrecognized: List[str] = field(default_factory=list)


def read_arguments_file(path):
    """Read one argument per line. Lines starting with # are comments; blank lines are skipped."""
    p = Path(path)
    if not p.exists():
        logger.debug(f"No arguments file at {p}")
        return []

    result = []
    for line in p.read_text().splitlines():
        if line.startswith(COMMENT_PREFIX):
            continue
        trimmed = line.strip()
        if trimmed == "":
            continue
        result.append(trimmed)
    return result


def split_terms(args):
    """Separate coin terms from leftover --options nothing recognized."""
    terms, unrecognized = [], []
    for arg in args:
        if arg.startswith(OPTION_PREFIX):
            unrecognized.append(arg)
        else:
            terms.append(arg)
    return terms, unrecognized


def build_options(config, args=(), overrides=None):
    """Combine config defaults, positional args and explicit CLI overrides (None = unset)."""
    calc = config.get("calculator", {})
    terms, unrecognized = split_terms(list(calc.get("coins") or []) + list(args))

    options = CalculatorOptions(
        coins=terms,
        use_minimum_prices=calc.get("use_minimum_prices", False),
        use_revenue_cache=calc.get("use_revenue_cache", True),
        sleep_time=float(calc.get("sleep_time", 1.0)),
        use_json_output=calc.get("use_json_output", False),
        show_header=calc.get("show_header", True),
        user_agent=config.get("whattomine", {}).get("user_agent") or "",
        continue_on_error=calc.get("continue_on_error", False),
        debug=str(config.get("logging", {}).get("level", "INFO")).upper() == "DEBUG",
        unrecognized=unrecognized,
    )

    for key, value in (overrides or {}).items():
        if value is not None:
            setattr(options, key, value)

    if options.sleep_time < 0:
        raise ValueError("sleep_time must be >= 0")
    return options
