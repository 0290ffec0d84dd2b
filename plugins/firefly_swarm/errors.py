"""
Firefly Swarm Errors

Both errors derive from ValueError so callers that already guard
parameter input with `except ValueError` keep working.
"""


class FireflySwarmError(ValueError):
    """Base class for swarm configuration errors."""


class UnknownFunctionKey(FireflySwarmError):
    """Raised when a function key is not one of the registered built-ins."""

    def __init__(self, key, known=()):
        self.key = key
        self.known = list(known)
        msg = f"Unknown function: {key!r}."
        if self.known:
            msg += f" Supported: {self.known}"
        super().__init__(msg)


class InvalidParameter(FireflySwarmError):
    """Raised when a swarm parameter is out of range or not recognized."""
