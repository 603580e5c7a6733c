# created: 10/19/2026
# last updated: 10/19/2026
# one request in, one answer out

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from material_proxy import gemini
from material_proxy.config import Settings
from material_proxy.errors import ErrorKind, ProxyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProxyResponse:
    status: int
    body: Dict[str, Any]


def error_response(error: ProxyError) -> ProxyResponse:
    return ProxyResponse(error.status, {"error": error.kind.message})


def _get_query(body: Any) -> str:
    if not isinstance(body, dict):
        return ""
    query = body.get("query")
    if not isinstance(query, str):
        return ""
    return query


def handle(method: str, body: Any, settings: Settings,
           post: Optional[Callable] = None) -> ProxyResponse:
    """Validate the request, ask Gemini, and shape the answer.

    Every failure ends up as a ProxyResponse carrying one of the fixed
    client messages in ErrorKind; details only go to the log.
    """
    # 1) only POST
    if method != "POST":
        return error_response(ProxyError(ErrorKind.INVALID_METHOD))

    # 2) need a product name
    query = _get_query(body)
    if not query.strip():
        return error_response(ProxyError(ErrorKind.MISSING_QUERY))

    # 3) need the key before calling out
    if not settings.api_key:
        logger.error("GEMINI_API_KEY is not set")
        return error_response(ProxyError(ErrorKind.MISCONFIGURED_CREDENTIAL))

    logger.info("Received query: %s", query)

    # 4) ask gemini
    try:
        data = gemini.ask_gemini(query, settings, post=post)
    except ProxyError as e:
        if e.kind is not ErrorKind.UPSTREAM_REJECTED:
            logger.error("Request failed (%s): %s", e.kind.code, e.detail)
        return error_response(e)
    except Exception:
        logger.exception("Server-side error")
        return error_response(ProxyError(ErrorKind.UNKNOWN))

    return ProxyResponse(200, data)
