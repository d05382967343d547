"""Exceptions raised by the sync commands.

ConfigurationError and its subclasses abort a run before or during the
scan. Per-post problems are logged as warnings and never raised.
"""


class SyncError(Exception):
    """Base exception for sync errors."""

    pass


class ConfigurationError(SyncError):
    """The command was set up with invalid arguments."""

    pass


class UnsupportedTableError(ConfigurationError):
    pass


class MissingSearchTermsError(ConfigurationError):
    pass


class InvalidRelationError(ConfigurationError):
    pass


class InvalidColumnError(ConfigurationError):
    pass


class MissingValueError(ConfigurationError):
    pass


class InvalidComparatorError(ConfigurationError):
    pass


class InvalidCallbackError(ConfigurationError):
    pass


class MissingSettingsError(ConfigurationError):
    """Apple News credentials are required but not configured."""

    pass
