"""Exceptions raised by bolt-pm commands.

Every failure is reported by the CLI entry point, which prints the message to
stderr and exits with a non-zero status.
"""


class BoltError(Exception):
    """Base class for failures that end a bolt-pm invocation."""


class ManifestNotFoundError(BoltError):
    pass


class ManifestParseError(BoltError):
    pass


class UsageError(BoltError):
    """Bad command line: unknown command, missing or extra arguments."""

    def __init__(self, message: str, show_usage: bool = False):
        super().__init__(message)
        self.show_usage = show_usage


class BuildFailedError(BoltError):
    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


class ConfigError(BoltError):
    """The tool configuration file could not be read."""
