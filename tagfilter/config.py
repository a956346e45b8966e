"""Configuration for tagfilter."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .core.exceptions import ConfigurationError
from .core.registry import CatalogerRegistry, default_registry
from .core.selection import split_tokens
from .logging_config import get_logger

logger = get_logger(__name__)

# Catalogers active when no --override-default-catalogers is given
DEFAULT_TAGS = ["image"]


@dataclass
class Config:
    """tagfilter configuration."""

    # Tags selecting the default catalogers (the base of every selection)
    default_tags: List[str] = field(default_factory=lambda: list(DEFAULT_TAGS))

    # JSON registry document; None = built-in catalogers
    registry_path: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration values."""
        if not self.default_tags:
            raise ConfigurationError(
                "default_tags must not be empty",
                setting="default_tags",
            )

        if not all(isinstance(t, str) and t for t in self.default_tags):
            raise ConfigurationError(
                f"Invalid default_tags {self.default_tags!r}: "
                f"tags must be non-empty strings",
                setting="default_tags",
            )

        if self.registry_path is not None:
            self.registry_path = Path(self.registry_path).expanduser()

    def load_registry(self) -> CatalogerRegistry:
        """Load the configured registry, or the built-in one."""
        if self.registry_path is None:
            return default_registry()
        logger.debug(f"Loading registry from {self.registry_path}")
        return CatalogerRegistry.load(self.registry_path)

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create config from environment variables.

        TAGFILTER_DEFAULT_TAGS: comma-separated default tags
        TAGFILTER_REGISTRY: path to a JSON registry document
        """
        kwargs = {}

        if env_tags := os.environ.get("TAGFILTER_DEFAULT_TAGS"):
            kwargs["default_tags"] = split_tokens([env_tags])

        if env_registry := os.environ.get("TAGFILTER_REGISTRY"):
            kwargs["registry_path"] = Path(env_registry)

        return cls(**kwargs)
