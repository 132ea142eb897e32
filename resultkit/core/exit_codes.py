"""Error codes for CLI exit status.

Maps the outcome of a ``resultkit run`` invocation to a shell exit code.
The numeric values are part of the CLI contract and should remain stable:
- 0: Success
- 1: The target returned a Fail (overridable in config)
- 2: User error (bad target, import failure)
- 3: Contract error (target did not return a Result)
- 4: Config error (config file missing or invalid)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    FAIL = 1
    USER_ERROR = 2
    CONTRACT_ERROR = 3
    CONFIG_ERROR = 4

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        """Check if this code indicates success."""
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        """Check if this code indicates an error."""
        return self != ErrorCode.OK
