# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the parse engine.

The engine never prints or exits. When it meets a `help` or `version` option it
raises one of these signals and leaves the rendering and the exit status to the
front end.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: A help option was given.
- VersionSignal: A version option was given.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Optline.

    These are not errors. They interrupt parsing so the caller can render
    help or version output instead of the parsed result.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised to display the program version."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
