"""Exception types raised by the listing and description tools."""


class LsiError(Exception):
    """Base class for all errors raised by this package."""

    message = "lsi error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        text = self.message if detail is None else self.message.format(detail)
        super().__init__(text)


class DescriptionNotFound(LsiError):
    """A requested description does not exist."""

    message = "Description not found for the specified path"


class PathNotFound(LsiError):
    """A path does not exist or cannot be reached."""

    message = "Path not found: The specified path does not exist or is inaccessible"


class FailedDisplay(LsiError):
    """Rendering the listing failed."""

    message = "Failed to display output: {}"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)


class FailedLaunchEditor(LsiError):
    """An external editor could not be started."""

    message = "Failed to launch editor: {}"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)


class InvalidPath(LsiError):
    """A path is malformed or cannot be represented as text."""

    message = (
        "Invalid path format: The path contains invalid characters or is malformed"
    )


class FileOperationFailed(LsiError):
    """A file operation did not succeed."""

    message = "File operation failed: {}"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)


class PermissionDenied(LsiError):
    """Access to a path was refused."""

    message = "Permission denied: Insufficient permissions to access {}"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)