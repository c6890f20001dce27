import logging
import time
from typing import Any

logger = logging.getLogger(__name__)

START_TIME_KEY = "logging_started_at"


class LoggingMiddleware:
    """Logs every emitted notification and how long its listeners took."""

    async def __call__(self, event_context: dict[str, Any], phase: str) -> None:
        event_name = event_context.get("event_name")

        if phase == "pre":
            # Per-emission state lives on the context; post may never run
            event_context[START_TIME_KEY] = time.perf_counter()
            logger.debug(f"Event started: {event_name}")

        elif phase == "post":
            start_time = event_context.pop(START_TIME_KEY, None)
            if start_time is not None:
                duration = time.perf_counter() - start_time
                logger.debug(f"Event completed: {event_name} (took {duration:.3f}s)")
            else:
                logger.debug(f"Event completed: {event_name}")


# Global instance
logging_middleware = LoggingMiddleware()
