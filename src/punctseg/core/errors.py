"""Exception taxonomy for catalog configuration and document reading."""

from typing import Optional


class PunctsegError(Exception):
    """Base class for all punctseg errors."""
    pass


class ConfigurationError(PunctsegError):
    """Raised when a required configuration element is missing or invalid."""

    def __init__(self, message: str, element: Optional[str] = None):
        super().__init__(message)
        self.element = element


class DocumentLoadError(PunctsegError):
    """Raised when a document cannot be located or read."""

    def __init__(self, message: str, file_name: Optional[str] = None):
        super().__init__(message)
        self.file_name = file_name


class EncodingError(DocumentLoadError):
    """Raised when document bytes cannot be decoded as the expected encoding."""
    pass
