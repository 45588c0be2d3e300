"""
Run rawsmet coroutines from synchronous code.

Download and load functions are coroutines. Each one also has a ``.sync``
attribute (see :func:`rawsmet.utils.add_sync_version`) that runs it to
completion in a fresh event loop:

    # async
    async with WRCCClient() as client:
        raws = await load_year(meta, 2020, config, client=client)

    # sync
    raws = load_year.sync(meta, 2020, config)
"""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union, get_args, get_origin

R = TypeVar("R")


class AsyncSyncBridge:
    """Runs async functions synchronously, creating a client when needed."""

    @staticmethod
    def run_async(
        async_fn: Callable[..., Awaitable[R]],
        args: tuple = (),
        kwargs: Optional[dict] = None,
        client_class: Optional[type] = None,
    ) -> R:
        """Run an async function synchronously.

        Args:
            async_fn: Async function to run
            args: Positional arguments for the function
            kwargs: Keyword arguments for the function
            client_class: Client class to instantiate if no client was passed

        Returns:
            Result of running the async function

        Raises:
            RuntimeError: If called from within a running event loop
        """
        if kwargs is None:
            kwargs = {}

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise RuntimeError(
                "Cannot use sync version from within an existing asyncio event loop. "
                "Use the async version instead."
            )

        temp_client = None
        if client_class:
            sig = inspect.signature(async_fn)
            if "client" in sig.parameters and kwargs.get("client") is None:
                temp_client = client_class()
                kwargs["client"] = temp_client

        async def _call_and_cleanup() -> R:
            try:
                return await async_fn(*args, **kwargs)
            finally:
                if temp_client:
                    await temp_client.close()

        return asyncio.run(_call_and_cleanup())

    @staticmethod
    def extract_client_class(annotation: Any) -> Optional[type]:
        """Extract the client class from an ``Optional[Client]`` annotation."""
        if annotation is None:
            return None

        origin = get_origin(annotation)
        if origin is Union:
            non_none_args = [arg for arg in get_args(annotation) if arg is not type(None)]
            if non_none_args and isinstance(non_none_args[0], type):
                return non_none_args[0]
        elif isinstance(annotation, type):
            return annotation

        return None
