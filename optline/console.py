# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Optline help, usage and error output."""
from rich.console import Console
from rich.theme import Theme

optline_theme = Theme(
    {
        "usage": "bold",
        "heading": "bold",
        "flag": "cyan",
        "epilog": "dim",
        "error": "bold red",
    }
)

console = Console(theme=optline_theme, highlight=False)
error_console = Console(theme=optline_theme, highlight=False, stderr=True)
