"""slowapi rate-limiter construction.

Each application gets its own ``Limiter`` built from its settings and kept on
``app.state.limiter``, where slowapi's 429 handler looks for it. Route
factories receive the same instance to decorate their handlers.

Handlers decorated with ``@limiter.shared_limit`` must accept a ``request``
parameter so slowapi can resolve the client address.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from envelope.core.settings import Settings

# Submission and photo upload draw from one bucket per client.
SUBMIT_LIMIT_SCOPE = "submit"


def build_limiter(settings: Settings) -> Limiter:
    """Return a client-IP keyed limiter configured from ``settings``."""
    return Limiter(
        key_func=get_remote_address,
        enabled=settings.rate_limit_enabled,
        storage_uri=settings.rate_limit_storage_uri,
    )
