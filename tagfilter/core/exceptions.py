"""
tagfilter Exception Hierarchy.

The tagged value set operations themselves never fail. Errors come from the
collaborators around them: building a selection request from CLI tokens,
loading or populating a cataloger registry, and reading configuration.

Exception Hierarchy:
    TagFilterError (base)
    ├── ConfigurationError
    ├── SelectionError
    └── RegistryError
        ├── DuplicateNameError
        ├── NotFoundError
        └── RegistryLoadError

Usage:
    from tagfilter.core.exceptions import TagFilterError, SelectionError

    try:
        request = SelectionRequest.from_expressions(expressions=["+"])
    except SelectionError as e:
        print(e.token)
"""

from typing import Optional


class TagFilterError(Exception):
    """
    Base exception for all tagfilter errors.

    Catch this to handle any library error while still allowing specific
    handling of the subclasses.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(TagFilterError):
    """Invalid configuration value."""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.setting = setting


class SelectionError(TagFilterError):
    """
    A selection expression could not be turned into a request.

    Examples:
    - "+" or "-" with no name after it
    - the same name both added and removed
    """

    def __init__(self, message: str, token: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.token = token


# =============================================================================
# REGISTRY ERRORS
# =============================================================================

class RegistryError(TagFilterError):
    """Base class for cataloger registry errors."""
    pass


class DuplicateNameError(RegistryError):
    """A cataloger with the same name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Cataloger already registered: {name}")
        self.name = name


class NotFoundError(RegistryError):
    """Requested cataloger is not in the registry."""

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, kwargs)
        self.resource_type = resource_type
        self.resource_id = resource_id


class RegistryLoadError(RegistryError):
    """
    A registry document could not be read or is malformed.

    Examples:
    - file missing or unreadable
    - invalid JSON
    - entry without a name, or tags that are not a list of strings
    """

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.path = path
