# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by flagspec.

Signals interrupt the normal return path of `parse()` without being treated as
errors. They inherit from `BaseException` so that `except Exception` blocks in
host applications never swallow them.

Signals:
- HelpSignal: Help text was requested while the process must not exit.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in flagspec."""


class HelpSignal(FlowSignal):
    """
    Raised instead of exiting when help output was requested.

    Attributes:
        text (str): The rendered help text.
        status (int): The exit status the process would have used.
    """

    def __init__(self, text: str = "", status: int = 0):
        super().__init__("Help signal received.")
        self.text = text
        self.status = status
