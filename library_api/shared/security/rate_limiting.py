"""
Rate limiting configuration.

Uses slowapi to enforce per-client limits on sensitive endpoints.
Only the login endpoint is limited, to slow down password guessing.
Violations are rendered by the centralized error handlers.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from library_api.core.config import Settings


def create_limiter(config: Settings) -> Limiter:
    """Build the limiter for one application instance.

    Each application gets its own limiter and in-memory counters, so
    building a second application never changes the first one.
    """
    return Limiter(key_func=get_remote_address, enabled=config.rate_limit_enabled)
