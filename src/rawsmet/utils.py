"""
Internal utility functions for rawsmet.
"""

import inspect
from typing import Any, Awaitable, Callable, TypeVar

R = TypeVar("R")


def add_sync_version(
    async_fn: Callable[..., Awaitable[R]],
) -> Callable[..., Awaitable[R]]:
    """
    A decorator that adds a .sync attribute to an async function, allowing it
    to be called synchronously.

    When the function takes a ``client`` argument annotated as
    ``Optional[SomeClient]`` and none is given, the .sync version creates one
    and closes it afterwards.

    Example:
        >>> @add_sync_version
        ... async def my_async_func(x):
        ...     return x * 2

        >>> result = my_async_func.sync(5)
    """
    # Import here to avoid circular imports
    from .sync import AsyncSyncBridge

    def sync_wrapper(*args: Any, **kwargs: Any) -> R:
        """Synchronous wrapper for the async function."""
        client_param = inspect.signature(async_fn).parameters.get("client")
        client_class = None
        if client_param is not None and kwargs.get("client") is None:
            client_class = AsyncSyncBridge.extract_client_class(client_param.annotation)

        return AsyncSyncBridge.run_async(
            async_fn, args=args, kwargs=kwargs, client_class=client_class
        )

    async_fn.sync = sync_wrapper  # type: ignore
    return async_fn
