# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Error taxonomy for configuration and directory lookups."""


class ConfigurationError(Exception):
    """A required setting is missing; the service must not start."""


class DirectoryError(Exception):
    """Base exception for failures while building the directory."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DirectoryFetchError(DirectoryError):
    """The member list could not be retrieved from Slack."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DirectoryParseError(DirectoryError):
    """Slack answered, but the payload is not a member list."""
