from __future__ import annotations

from enum import Enum


class Lifetime(str, Enum):
    """Define how long a registered implementation lives in the host container.

    AutoWire only records the value on each descriptor. Creating and caching
    instances is the host container's job.
    """

    TRANSIENT = "transient"
    """A new instance is created every time the service is requested."""

    SCOPED = "scoped"
    """Instance is shared within a scope, different instances across scopes."""

    SINGLETON = "singleton"
    """A single instance is created and shared for the lifetime of the container."""
