import sys

from optline import OptionParser
from optline.utils import setup_logging

setup_logging()

parser = OptionParser(description="just an example", version="%prog 1.0")
parser.add_option(
    "-f", "--file", dest="filename", metavar="FILE", help="write report to FILE"
)
parser.add_option("-q", "--quiet").set_action("store_false").set_dest(
    "verbose"
).set_default("1").set_help("don't print status messages to stdout")
parser.add_option(
    "-l", "--level", choices=["low", "high"], default="low", help="detail [%default]"
)
parser.add_option("-v", action="count", dest="noise", help="repeat for more noise")

if __name__ == "__main__":
    options, args = parser.parse_argv(sys.argv)

    if options.get_value("verbose").as_bool():
        print(f"writing {options.get('filename', '<stdout>')} at level {options['level']}")
        print(f"noise: {options.get_value('noise').as_int()}")
        print(f"args: {args}")
