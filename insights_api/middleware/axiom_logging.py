"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per request to Axiom: method, path, query and
path params, status code, duration and, for error responses, the error
detail. Sensitive query params (token, secret, ...) are masked.
Inactive unless both AXIOM_API_TOKEN and AXIOM_DATASET are configured.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from insights_api.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 키 패턴 — Keys to mask in logged query params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def _mask_params(params: dict[str, str]) -> dict[str, str]:
    """민감 파라미터 마스킹 — Mask sensitive query params."""
    return {k: "***" if _SENSITIVE_KEYS.search(k) else v for k, v in params.items()}


def _error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유 추출 — Extract `detail` from an error body."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:500]
    detail = data.get("detail", data) if isinstance(data, dict) else data
    text = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    return text if len(text) <= 500 else text[:500] + "..."


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every API request and its outcome to Axiom.
    Passes requests through untouched when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 스킵 — Skip excluded paths
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        # Axiom 미설정시 패스스루 — Pass through if Axiom not configured
        if not self._client:
            return await call_next(request)

        start_time = time.perf_counter()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
        }
        if request.query_params:
            event["query_params"] = _mask_params(dict(request.query_params))

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            if request.path_params:
                event["path_params"] = dict(request.path_params)

            # 에러 응답시 body에서 사유 추출 — Extract error detail from error responses
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            self._ingest(event)

        return response

    def _ingest(self, event: dict[str, Any]) -> None:
        """Axiom 전송. 실패해도 요청 처리는 계속됩니다.

        Ingest one event. An ingest failure is logged locally and never
        changes the response.
        """
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception as exc:
            logger.warning("Axiom ingest failed for %s %s: %s", event["method"], event["path"], exc)
