"""Error taxonomy -- every failure the expander can report, with its exit code.

Errors are raised where they are detected and handled once, in ``main.run``,
which prints the message and maps the error to its exit code.
"""

from __future__ import annotations

EXIT_OK = 0
EXIT_INTERNAL = 1
EXIT_USAGE = 2
EXIT_EXPANSION = 3
EXIT_CONFIG = 4


class CronExpanderError(Exception):
    """Base class for all errors surfaced to the user."""

    exit_code = EXIT_INTERNAL


class InsufficientArguments(CronExpanderError):
    """Fewer tokens than five fields plus a command."""

    exit_code = EXIT_USAGE


class ConfigError(CronExpanderError):
    """The config file is missing, unreadable or fails validation."""

    exit_code = EXIT_CONFIG


class CronExpansionError(CronExpanderError, ValueError):
    """A field's syntax could not be expanded.

    ``token`` is the piece of input the message refers to.
    """

    exit_code = EXIT_EXPANSION

    def __init__(self, message: str, token: str = "") -> None:
        self.token = token
        super().__init__(message)


class InvalidValue(CronExpansionError):
    pass


class OutOfRange(CronExpansionError):
    pass


class InvalidRange(CronExpansionError):
    pass


class InvalidStep(CronExpansionError):
    pass


class InvalidStepBase(CronExpansionError):
    pass


class NonPositiveStep(CronExpansionError):
    pass


class StepTooLarge(CronExpansionError):
    pass
