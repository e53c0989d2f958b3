"""Router configuration.

RouterConfig is a frozen dataclass, built once and passed to every router
component that logs or converts captures.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from oscroute.routing.params import Converter


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(debug=True, converters={"hex": HEX})
    """

    # Logging
    debug: bool = False  # Log every dispatch and render at DEBUG
    log_misses: bool = True  # Log malformed/unmatched addresses at INFO before raising

    # Extra capture converters, merged over the built-ins by type tag
    converters: Mapping[str, Converter] = field(default_factory=lambda: MappingProxyType({}))
