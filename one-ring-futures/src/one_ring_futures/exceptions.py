"""Contract violations.

These are programming errors in the code driving a future, never the result of
external input. They derive from BaseException so that ``except Exception``
blocks in the driving code don't swallow them.
"""


class Fault(BaseException):
    """Unrecoverable misuse of a future."""


class PolledAfterTaken(Fault):
    """A MaybeDone was polled after its output was taken."""


class PolledAfterCompletion(Fault):
    """A future was polled again after it had already completed."""


class OutputTaken(Fault):
    """An output reference was used after the output was taken."""
