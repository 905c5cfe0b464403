"""Error types and payload helpers for upstream orchestration failures."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class UpstreamUnavailable(Exception):
    """An upstream call failed at the transport level or answered with an error status.

    ``status_code`` is the upstream's HTTP status when it answered, 500 when the
    connection itself failed. Never retried.
    """

    def __init__(
        self,
        message: str,
        *,
        service: str,
        step: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.service = service
        self.step = step
        self.status_code = status_code
        self.detail = detail if detail is not None else message


class ErrorHandler:
    def handle_upstream(self, exc: UpstreamUnavailable) -> Dict[str, Any]:
        logger.error(
            "Upstream %s failed during %s: status=%s detail=%s",
            exc.service,
            exc.step,
            exc.status_code,
            exc.detail,
        )
        return {
            "error": "upstream_unavailable",
            "service": exc.service,
            "step": exc.step,
            "detail": exc.detail,
        }

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception in orchestration: %s", exc, exc_info=True)
        return {
            "error": "internal_error",
            "message": "An internal error occurred while processing your request. Please try again later.",
            "metadata": {"error": str(exc), "context": context or {}},
        }
