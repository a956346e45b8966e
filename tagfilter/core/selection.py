"""
Cataloger selection.

Turns a SelectionRequest into the list of active values by layering
TaggedValueSet operations in a fixed order:

    1. base    - replace the default tags (select)
    2. select  - narrow further within the base (select)
    3. remove  - drop by tag or name
    4. add     - pull back from the full universe by tag or name

A stage with an empty list is skipped entirely. This differs from calling
TaggedValueSet.select() with no tags, which selects nothing.

Requests are usually built from CLI flags:

    --override-default-catalogers image,python
    --select-catalogers "+sbom-cataloger,-python-installed-package-cataloger,javascript"
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TypeVar

from ..logging_config import get_logger
from .exceptions import SelectionError
from .tagged import TaggedValueSet

logger = get_logger(__name__)

T = TypeVar("T")

ADD_PREFIX = "+"
REMOVE_PREFIX = "-"


def split_tokens(raw: Optional[Iterable[str]]) -> List[str]:
    """
    Flatten comma-separated arguments into a token list.

    Whitespace around each token is stripped and empty tokens are dropped,
    so ``["a, b", "", "c,"]`` becomes ``["a", "b", "c"]``.
    """
    tokens = []
    for arg in raw or []:
        for token in arg.split(","):
            token = token.strip()
            if token:
                tokens.append(token)
    return tokens


@dataclass
class SelectionRequest:
    """
    What to activate, relative to a universe of tagged items.

    Attributes:
        base: Tags replacing the default active tags
        select: Tags narrowing the base selection
        remove: Tags (or names) to exclude
        add: Tags (or names) to include from the full universe
    """
    base: List[str] = field(default_factory=list)
    select: List[str] = field(default_factory=list)
    remove: List[str] = field(default_factory=list)
    add: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check whether the request changes nothing."""
        return not (self.base or self.select or self.remove or self.add)

    @classmethod
    def from_expressions(
        cls,
        base: Optional[Iterable[str]] = None,
        expressions: Optional[Iterable[str]] = None,
    ) -> "SelectionRequest":
        """
        Build a request from CLI style arguments.

        Args:
            base: Values of --override-default-catalogers
            expressions: Values of --select-catalogers. "+name" adds,
                "-name" removes, anything else narrows the selection.

        Returns:
            New SelectionRequest

        Raises:
            SelectionError: On a bare "+" or "-", or a name that is both
                added and removed
        """
        request = cls(base=split_tokens(base))

        for token in split_tokens(expressions):
            if token.startswith(ADD_PREFIX):
                request.add.append(_strip_prefix(token, ADD_PREFIX))
            elif token.startswith(REMOVE_PREFIX):
                request.remove.append(_strip_prefix(token, REMOVE_PREFIX))
            else:
                request.select.append(token)

        conflicts = [name for name in request.add if name in request.remove]
        if conflicts:
            raise SelectionError(
                f"Cannot both add and remove: {', '.join(conflicts)}",
                token=conflicts[0],
            )

        return request


def _strip_prefix(token: str, prefix: str) -> str:
    name = token[len(prefix):].strip()
    if not name:
        raise SelectionError(f"Missing name after '{prefix}'", token=token)
    return name


def filter_set(
    universe: TaggedValueSet[T],
    request: SelectionRequest,
) -> TaggedValueSet[T]:
    """
    Apply a selection request to a universe.

    Args:
        universe: Every known item with its tags
        request: The selection request

    Returns:
        The selected entries, in selection order
    """
    result = universe
    logger.debug(f"Selection starts with {len(result)} items")

    if request.base:
        result = result.select(*request.base)
        logger.debug(f"After base {request.base}: {len(result)} items")

    if request.select:
        result = result.select(*request.select)
        logger.debug(f"After select {request.select}: {len(result)} items")

    if request.remove:
        result = result.remove(*request.remove)
        logger.debug(f"After remove {request.remove}: {len(result)} items")

    # Additions come from the full universe, not the narrowed result
    if request.add:
        result = result.join(*universe.select(*request.add))
        logger.debug(f"After add {request.add}: {len(result)} items")

    return result


def filter_values(universe: TaggedValueSet[T], request: SelectionRequest) -> List[T]:
    """Apply a selection request and return the selected values."""
    return filter_set(universe, request).values()
