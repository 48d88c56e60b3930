# ABOUTME: Error kinds raised by path resolution, the config store and the tool boundary
# ABOUTME: Each class also derives from the matching built-in so plain except clauses work


class ConfigurationError(Exception):
    """Base class for every failure reported back to a caller.

    The ``kind`` attribute is the stable, transport-facing name of the
    failure; the message is meant for humans.
    """

    kind = "ConfigurationError"


class InvalidArgumentError(ConfigurationError, TypeError):
    """A tool argument has the wrong type."""

    kind = "InvalidArgument"


class InvalidClientError(ConfigurationError, ValueError):
    """Client identifier outside the supported set."""

    kind = "InvalidClient"


class UnsupportedPlatformError(ConfigurationError, RuntimeError):
    """Host operating system has no known config layout."""

    kind = "UnsupportedPlatform"


class ConfigFileNotFoundError(ConfigurationError, FileNotFoundError):
    """No config file exists at the resolved path."""

    kind = "FileNotFound"


class ConfigReadError(ConfigurationError, OSError):
    kind = "ReadFailure"


class ConfigParseError(ConfigurationError, ValueError):
    """Config file content is not a JSON object."""

    kind = "ParseFailure"


class ConfigWriteError(ConfigurationError, OSError):
    kind = "WriteFailure"


class ServerNotFoundError(ConfigurationError, LookupError):
    kind = "ServerNotFound"


class ServerAlreadyExistsError(ConfigurationError, ValueError):
    kind = "ServerAlreadyExists"


class InvalidServerEntryError(ConfigurationError, TypeError):
    """Server entry is not a non-null JSON object."""

    kind = "InvalidServerEntry"
