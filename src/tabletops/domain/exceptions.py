"""Recoverable error conditions raised by the configurator."""

from __future__ import annotations


class DrawingUploadError(Exception):
    """Raised when an uploaded drawing cannot be used."""

    error_type = "upload"


class UnsupportedFileTypeError(DrawingUploadError):
    """Raised when the upload is neither a DXF nor a DWG file."""

    error_type = "unsupported_file_type"

    def __init__(self, file_name: str, extension: str, accepted: tuple[str, ...]) -> None:
        self.file_name = file_name
        self.extension = extension
        self.accepted = accepted
        super().__init__(
            f"Only {' or '.join(ext.upper() for ext in accepted)} files are supported "
            f"(got {file_name!r})."
        )


class NoOutlineFoundError(DrawingUploadError):
    """Raised when a DXF parses but contains no usable paths."""

    error_type = "no_outline"

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"No closed polylines were found in {file_name}.")


class PricingError(Exception):
    """Raised when the authoritative price could not be obtained."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
