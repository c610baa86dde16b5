import logging
import time
import uuid

from fastapi import Request

from ..services.telemetry import HTTP_REQUEST_DURATION

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"


def _route_label(request: Request) -> str:
    # Шаблон пути после маршрутизации, иначе фактический путь
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


async def request_instrumentation(request: Request, call_next):
    """ID запроса, гистограмма длительности и строка лога на каждый запрос"""
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id
    telemetry = request.app.state.telemetry
    start = time.perf_counter()

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
    finally:
        duration = time.perf_counter() - start
        telemetry.observe_histogram(
            HTTP_REQUEST_DURATION,
            duration,
            method=request.method,
            route=_route_label(request),
            status_code=str(status_code),
        )
        logger.info(
            f"http_request request_id={request_id} method={request.method} "
            f"path={request.url.path} status={status_code} "
            f"duration_ms={duration * 1000:.1f} "
            f"user_agent={request.headers.get('user-agent', '')!r}"
        )
