"""Exceptions raised while fetching and assembling a VOD."""


class GtvFetchError(Exception):
    """Base exception for all gtvfetch failures."""

    pass


class ApiError(GtvFetchError):
    """Raised when a metadata API call fails or returns unusable JSON."""

    pass


class DownloadError(GtvFetchError):
    """Raised when a playlist or segment cannot be fetched."""

    pass


class PlaylistError(GtvFetchError):
    """Raised when a playlist does not have the expected shape."""

    pass


class StorageError(GtvFetchError):
    """Raised when creating directories or writing files fails."""

    pass


class RemuxError(GtvFetchError):
    """Raised when the remux tool exits with a failure status."""

    pass
