# app/middleware/metrics.py
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from typing import Callable


def new_metrics() -> dict:
    return {"requests": 0, "total_response_ms": 0.0}


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Collects in-process request metrics:
      - total requests
      - total response time (ms)
    app.state is not touched in __init__; it may not exist yet while the middleware stack builds.
    """

    def __init__(self, app, dispatch: Callable = None):
        super().__init__(app, dispatch=dispatch)

    async def dispatch(self, request: Request, call_next):
        metrics = getattr(request.app.state, "metrics", None)
        if metrics is None:
            # first request before startup ran (e.g. TestClient without lifespan)
            metrics = request.app.state.metrics = new_metrics()

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        # single-process counters
        metrics["requests"] = metrics.get("requests", 0) + 1
        metrics["total_response_ms"] = metrics.get("total_response_ms", 0.0) + elapsed_ms

        return response
