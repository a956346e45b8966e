"""
tagfilter Core.

Tagged value sets, the cataloger registry, and the selection pipeline.
"""

from .tagged import TaggedValue, TaggedValueSet
from .selection import SelectionRequest, filter_set, filter_values, split_tokens
from .registry import (
    CatalogerDefinition,
    CatalogerRegistry,
    DEFAULT_CATALOGERS,
    default_registry,
)
from .exceptions import (
    TagFilterError,
    ConfigurationError,
    SelectionError,
    RegistryError,
    DuplicateNameError,
    NotFoundError,
    RegistryLoadError,
)

__all__ = [
    # Tagged values
    "TaggedValue",
    "TaggedValueSet",
    # Selection
    "SelectionRequest",
    "filter_set",
    "filter_values",
    "split_tokens",
    # Registry
    "CatalogerDefinition",
    "CatalogerRegistry",
    "DEFAULT_CATALOGERS",
    "default_registry",
    # Errors
    "TagFilterError",
    "ConfigurationError",
    "SelectionError",
    "RegistryError",
    "DuplicateNameError",
    "NotFoundError",
    "RegistryLoadError",
]
