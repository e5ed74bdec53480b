"""Output handlers for calculated coins."""
from output.base import OutputHandler
from output.plain import PlainHandler
from output.json_output import JSONHandler


def choose_handler(use_json_output, console=None):
    if use_json_output:
        return JSONHandler(console)
    return PlainHandler(console)
