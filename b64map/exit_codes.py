from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses of the b64map command."""

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
