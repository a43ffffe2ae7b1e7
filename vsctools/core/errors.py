"""
Error kinds raised by vsctools. Each carries the process exit code the CLI uses.
"""


class VsctoolsError(Exception):
    exit_code = 1


class ConfigError(VsctoolsError):
    """API URL or token could not be determined."""
    exit_code = 1


class MissingRequiredArgument(VsctoolsError):
    """None of the supplied filters resolves to a query."""
    exit_code = 2


class RequestError(VsctoolsError):
    """The API answered with a non-2xx status, or could not be reached."""
    exit_code = 3

    def __init__(self, message, status_code=None, url=None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodeError(VsctoolsError):
    """The response body does not match the expected record shape."""
    exit_code = 4

    def __init__(self, message, payload=None, field=None):
        super().__init__(message)
        self.payload = payload
        self.field = field


class InvalidArgument(VsctoolsError):
    """A filter value cannot be used as a path segment."""
    exit_code = 2
