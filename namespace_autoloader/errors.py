"""Exception types raised by the autoloader and its host registry."""


class AutoloaderError(Exception):
    """Base class for all autoloader errors."""


class ConfigurationError(AutoloaderError, ValueError):
    """Raised when autoloader options are missing or invalid."""


class ClassNotFoundError(AutoloaderError, LookupError):
    """Raised by the registry when no autoloader could define a class."""

    def __init__(self, identifier: str) -> None:
        """Record the identifier that stayed undefined."""
        super().__init__(f"Class not found: {identifier}")
        self.identifier = identifier


class DuplicateClassError(AutoloaderError):
    """Raised when an identifier is defined twice with different classes."""

    def __init__(self, identifier: str) -> None:
        """Record the identifier that was redefined."""
        super().__init__(f"Cannot redeclare class {identifier}")
        self.identifier = identifier
