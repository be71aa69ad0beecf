"""Shared slowapi limiter, keyed by client IP address.

Routes opt in with ``@limiter.limit(DEFAULT_LIMIT)`` and must accept a
``request: Request`` argument.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from officedesk.config import settings

limiter = Limiter(key_func=get_remote_address)

DEFAULT_LIMIT = settings.rate_limit_default
