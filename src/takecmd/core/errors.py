"""Error kinds raised while generating a briefing.

Every error is unrecoverable for the run that raised it. They subclass
ValueError so callers validating input can catch them alongside other
value problems.
"""


class TakeCommandError(Exception):
    """Base class for all takecmd errors."""


class InvalidConfiguration(TakeCommandError, ValueError):
    """Settings document is missing keys, malformed, or inconsistent."""


class InvalidRange(TakeCommandError, ValueError):
    """A sampling range has min > max or contains no valid value."""


class EmptyPool(TakeCommandError, ValueError):
    """Tried to pick a value from an empty pool."""


class InsufficientPool(TakeCommandError, ValueError):
    """Requested more distinct values than the pool holds."""
