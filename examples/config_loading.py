"""config_loading.py"""
import sys
from pathlib import Path

from optline.config import loader

parser = loader(Path(__file__).parent / "report.yaml")

if __name__ == "__main__":
    values, args = parser.parse_args(sys.argv[1:])
    print(values.as_dict(), args)
