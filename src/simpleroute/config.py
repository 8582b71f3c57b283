"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from simpleroute.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(log_steps=True)
    """

    # Paths
    separator: str = "/"

    # Tree
    root_key: str = "root"  # Key of the root node when the router builds its own tree

    # Logging
    log_steps: bool = False  # Debug-log every traversal step

    def __post_init__(self) -> None:
        if not self.separator:
            msg = "RouterConfig.separator must be a non-empty string."
            raise ConfigurationError(msg)
        if not self.root_key.strip():
            msg = "RouterConfig.root_key must not be blank."
            raise ConfigurationError(msg)
