import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class EventSystem:
    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable]] = {}
        self._middleware: list[Callable] = []
        self._pending: set[asyncio.Task] = set()

    def add_middleware(self, middleware: Callable) -> None:
        self._middleware.append(middleware)
        logger.debug(f"Added middleware: {_name_of(middleware)}")

    def remove_middleware(self, middleware: Callable) -> None:
        if middleware in self._middleware:
            self._middleware.remove(middleware)
            logger.debug(f"Removed middleware: {_name_of(middleware)}")

    def listen(self, event_name: str) -> Callable:
        def decorator(func: Callable) -> Callable:
            self.add_listener(event_name, func)
            return func

        return decorator

    def add_listener(self, event_name: str, callback: Callable) -> None:
        if event_name not in self._listeners:
            self._listeners[event_name] = []
        self._listeners[event_name].append(callback)
        logger.debug(f"Added listener for {event_name}: {_name_of(callback)}")

    def remove_listener(self, event_name: str, callback: Callable) -> None:
        if event_name in self._listeners:
            try:
                self._listeners[event_name].remove(callback)
                logger.debug(f"Removed listener for {event_name}: {_name_of(callback)}")
            except ValueError:
                logger.warning(f"Listener {_name_of(callback)} not found for {event_name}")

    def remove_all_listeners(self, event_name: str) -> None:
        if event_name in self._listeners:
            self._listeners[event_name].clear()
            logger.debug(f"Removed all listeners for {event_name}")

    async def emit(self, event_name: str, *args: Any, **kwargs: Any) -> None:
        if not self._listeners.get(event_name):
            return

        event_context = {
            "event_name": event_name,
            "args": args,
            "kwargs": kwargs,
            "stopped": False,
        }

        # Run middleware (pre-processing)
        for middleware in self._middleware:
            try:
                result = await self._call_maybe_async(middleware, event_context, "pre")
                if result is False or event_context.get("stopped"):
                    logger.debug(f"Event {event_name} stopped by middleware")
                    return
            except Exception as e:
                logger.error(f"Error in middleware {_name_of(middleware)}: {e}")

        listeners = list(self._listeners[event_name])
        results = await asyncio.gather(
            *(self._execute_listener(listener, *args, **kwargs) for listener in listeners),
            return_exceptions=True,
        )
        for listener, result in zip(listeners, results):
            if isinstance(result, Exception):
                logger.error(f"Error in listener {_name_of(listener)} for {event_name}: {result}")

        # Run middleware (post-processing)
        for middleware in self._middleware:
            try:
                await self._call_maybe_async(middleware, event_context, "post")
            except Exception as e:
                logger.error(f"Error in middleware {_name_of(middleware)} (post): {e}")

    def emit_nowait(self, event_name: str, *args: Any, **kwargs: Any) -> None:
        """Emit an event from synchronous code.

        Inside a running event loop the emission is scheduled as a task;
        otherwise it runs to completion before returning.
        """
        if not self._listeners.get(event_name):
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self.emit(event_name, *args, **kwargs))
            return

        task = loop.create_task(self.emit(event_name, *args, **kwargs))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _execute_listener(self, listener: Callable, *args: Any, **kwargs: Any) -> None:
        try:
            await self._call_maybe_async(listener, *args, **kwargs)
        except Exception as e:
            logger.error(f"Error executing listener {_name_of(listener)}: {e}")
            raise

    async def _call_maybe_async(self, func: Callable, *args: Any, **kwargs: Any) -> Any:
        result = func(*args, **kwargs)
        if asyncio.iscoroutine(result):
            return await result
        return result

    def get_listeners(self, event_name: str) -> list[Callable]:
        return self._listeners.get(event_name, []).copy()


def _name_of(func: Callable) -> str:
    return getattr(func, "__name__", type(func).__name__)

