import contextlib
import sys

from yaspin.core import Yaspin


class Yaspin2(Yaspin):
    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.ok("✔")
        else:
            self.fail("✘")
        super().__exit__(exc_type, exc_value, traceback)


def spinner(text: str = "", **kwargs) -> Yaspin | contextlib.nullcontext:
    """Spinner that marks its line as done or failed on exit."""
    # no animation when piped or captured
    if not sys.stdout.isatty():
        return contextlib.nullcontext()
    return Yaspin2(text=text, timer=True, **kwargs)
