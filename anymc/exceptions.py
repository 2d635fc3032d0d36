from typing import Optional


class InstallerError(Exception):
    """Base exception for anymc."""


class ValidationError(InstallerError):
    """Raised when an install request fails a precondition."""


class NetworkError(InstallerError):
    """Raised on transport failures or non-success HTTP statuses."""


class DownloadError(NetworkError):
    """Raised when a library download returns a non-success status."""

    def __init__(self, url: str, status: Optional[int]):
        self.url = url
        self.status = status
        super().__init__(f"Library download returned with status code {status}: {url}")


class DecodeError(InstallerError):
    """Raised when a document does not match the expected shape."""


class CoordinateParseError(InstallerError):
    """Raised for a malformed group:artifact:version coordinate."""


class PathError(InstallerError):
    """Raised when a library path can't be made relative to the launch jar."""
