"""Langfuse tracing for LLM generation calls.

With LANGFUSE_PUBLIC_KEY unset, `observe` is a pass-through decorator so
the router and writing assistant can be decorated unconditionally.
"""

import asyncio
import logging
from collections.abc import Callable
from functools import wraps

from src.core.config import settings

# Langfuse SDK warns on every call when keys are missing
logging.getLogger("langfuse").setLevel(logging.ERROR)


if settings.langfuse_public_key:
    from langfuse import observe
else:

    def observe(name: str = "", **kwargs) -> Callable:  # type: ignore[misc]
        """Tracing disabled: return the function wrapped unchanged."""

        def decorator(fn: Callable) -> Callable:
            if asyncio.iscoroutinefunction(fn):

                @wraps(fn)
                async def async_wrapper(*args, **kw):
                    return await fn(*args, **kw)

                return async_wrapper

            @wraps(fn)
            def sync_wrapper(*args, **kw):
                return fn(*args, **kw)

            return sync_wrapper

        return decorator


__all__ = ["observe"]
