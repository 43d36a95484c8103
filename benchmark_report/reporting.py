"""Console sink for progress messages and soft failures."""

import sys
from typing import Optional, TextIO


class ConsoleReporter:
    """Prints progress to stdout and errors to stderr.

    Any object with the same ``info``/``error`` methods can be passed to
    ``generate()`` instead, e.g. to collect messages in tests.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = out
        self.err = err

    def info(self, message: str) -> None:
        print(message, file=self.out if self.out is not None else sys.stdout)

    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        if cause is not None:
            message = f"{message} ({type(cause).__name__}: {cause})"
        print(f"Error: {message}", file=self.err if self.err is not None else sys.stderr)
