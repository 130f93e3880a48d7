"""
Callback support for async operations.

Every manager operation can be awaited, or given a ``callback`` keyword
that is invoked as ``callback(error, result)`` once the call finishes.
"""

import asyncio
import functools
from typing import Any, Awaitable, Callable, Optional, Set, TypeVar

Callback = Callable[[Optional[BaseException], Any], None]

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

# Strong references so scheduled callback tasks are not garbage collected
_background_tasks: Set["asyncio.Task[Any]"] = set()


def _notify(callback: Callback, task: "asyncio.Task[Any]") -> None:
    _background_tasks.discard(task)

    if task.cancelled():
        callback(asyncio.CancelledError(), None)
        return

    error = task.exception()
    if error is not None:
        callback(error, None)
    else:
        callback(None, task.result())


def with_callback(func: F) -> F:
    """
    Decorator adding the optional ``callback`` keyword to an async method.

    Without a callback the decorated method returns an awaitable. With a
    callback the call is scheduled on the running event loop, the task is
    returned, and the callback receives ``(None, result)`` or
    ``(error, None)``. The callback may also be passed as the last
    positional argument. Errors, including bad arguments, always arrive
    through the awaitable or the callback, never from the call itself.

    Usage:
        ```python
        class OrganizationsManager:
            @with_callback
            async def get(self, params):
                return await self.resource.get(params)

        org = await manager.get({"id": "org_123"})

        def done(err, org):
            ...

        manager.get({"id": "org_123"}, callback=done)
        manager.get({"id": "org_123"}, done)
        ```
    """

    @functools.wraps(func)
    def wrapper(*args: Any, callback: Optional[Callback] = None, **kwargs: Any) -> Any:
        # A trailing callable after self is the callback.
        if callback is None and len(args) > 1 and callable(args[-1]):
            callback = args[-1]
            args = args[:-1]

        async def run() -> Any:
            return await func(*args, **kwargs)

        if callback is None:
            return run()

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            callback(e, None)
            return None

        task = loop.create_task(run())
        _background_tasks.add(task)
        task.add_done_callback(functools.partial(_notify, callback))
        return task

    return wrapper  # type: ignore[return-value]
