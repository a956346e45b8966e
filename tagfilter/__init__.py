"""
tagfilter - Tag-based cataloger selection.

Values carry tags; selections are built from tags.

Quick Start:
    >>> from tagfilter import SelectionRequest, default_registry, filter_values
    >>> universe = default_registry().universe()
    >>> request = SelectionRequest.from_expressions(
    ...     base=["image"],
    ...     expressions=["python,+sbom-cataloger"],
    ... )
    >>> filter_values(universe, request)
    ['python-installed-package-cataloger', 'sbom-cataloger']
"""

__version__ = "0.1.0"

from .core import (
    TaggedValue,
    TaggedValueSet,
    SelectionRequest,
    filter_set,
    filter_values,
    CatalogerDefinition,
    CatalogerRegistry,
    default_registry,
    TagFilterError,
)
from .config import Config

__all__ = [
    "TaggedValue",
    "TaggedValueSet",
    "SelectionRequest",
    "filter_set",
    "filter_values",
    "CatalogerDefinition",
    "CatalogerRegistry",
    "default_registry",
    "TagFilterError",
    "Config",
    "__version__",
]
