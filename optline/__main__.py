"""
Optline Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Try out a parser declared in a config file:

    python -m optline -c report.yaml -- -f out.txt -q extra
"""

import json
import sys
from typing import Sequence

from rich.table import Table

from optline.config import loader
from optline.console import console
from optline.exceptions import OptlineError
from optline.option_parser import OptionParser
from optline.parser.values import Values
from optline.utils import setup_logging
from optline.version import __version__


def get_root_parser() -> OptionParser:
    parser = OptionParser(
        usage="%prog -c CONFIG [options] [--] ARGS...",
        description="Parse ARGS with the options declared in CONFIG.",
        prog="optline",
        version=f"%prog {__version__}",
    )
    parser.add_option(
        "-c",
        "--config",
        metavar="FILE",
        help="YAML or TOML file declaring the options",
    )
    parser.add_option(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (repeatable)",
    )
    parser.add_option(
        "--json",
        action="store_true",
        dest="as_json",
        help="print the result as JSON",
    )
    return parser


def render_result(values: Values, leftovers: list[str], as_json: bool) -> None:
    if as_json:
        console.print_json(json.dumps({"values": values.as_dict(), "args": leftovers}))
        return
    table = Table(title="Parsed values")
    table.add_column("dest", style="bold")
    table.add_column("value")
    for dest, value in values.as_dict().items():
        table.add_row(dest, repr(value))
    console.print(table)
    console.print(f"[bold]args:[/bold] {leftovers!r}")


def main(argv: Sequence[str] | None = None) -> int:
    root = get_root_parser()
    args = list(sys.argv if argv is None else argv)
    options, remaining = root.parse_argv(args)

    setup_logging(verbosity=options.get_value("verbose").as_int())

    if not options.is_set("config"):
        root.error("a config file is required (-c FILE)")

    try:
        parser = loader(options["config"])
    except (OSError, OptlineError, ValueError) as error:
        root.error(str(error))

    values, leftovers = parser.parse_args(remaining)
    render_result(values, leftovers, options.get_value("as_json").as_bool())
    return 0


if __name__ == "__main__":
    sys.exit(main())
