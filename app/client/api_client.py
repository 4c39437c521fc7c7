import asyncio
from typing import Any

import requests
import structlog

from app.exceptions import AppError

logger = structlog.get_logger()

REDACTED = "[REDACTED]"


class ApiError(AppError):
    def __init__(self, status_code: int, message: str, error_code: str | None = None):
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(message, code="API_ERROR")


def build_auth_headers(token: str, organization_id: str, company_id: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {token}",
        "sil-organization": organization_id,
        "sil-company": company_id,
    }


def redact_headers(headers: dict[str, str] | None) -> dict[str, str]:
    if not headers:
        return {}
    return {
        key: REDACTED if key.lower() == "authorization" else value for key, value in headers.items()
    }


def _extract_body_info(body: Any) -> tuple[str | None, str | None]:
    """Pull a human message and an error code out of an error response body."""
    if not isinstance(body, dict):
        return None, None

    message = None
    for key in ("display_message", "message", "error_description", "error"):
        if body.get(key):
            message = str(body[key])
            break

    error_code = str(body["error_code"]) if body.get("error_code") else None
    return message, error_code


def _fallback_message(status_code: int) -> str:
    if status_code == 400:
        return "Erro de validação. Verifique os dados informados."
    if status_code == 401:
        return "Não autorizado. Faça login novamente."
    if status_code >= 500:
        return "Erro interno do servidor. Tente novamente mais tarde."
    return f"Erro inesperado ({status_code})."


def error_from_response(status_code: int, body: Any) -> ApiError:
    """Build an ApiError whose message carries the error code, so callers can surface it."""
    message, error_code = _extract_body_info(body)
    message = message or _fallback_message(status_code)
    if error_code:
        message = f"[{error_code}] {message}"
    return ApiError(status_code, message, error_code)


class ApiClient:
    """Performs single requests against the platform API and maps failures to ApiError."""

    def __init__(self, timeout_seconds: float, session: requests.Session | None = None) -> None:
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        payload: Any = None,
    ) -> Any:
        return await asyncio.to_thread(self._send, method, url, headers, payload)

    async def post(self, url: str, *, headers: dict[str, str], payload: Any) -> Any:
        return await self.request("POST", url, headers=headers, payload=payload)

    def close(self) -> None:
        self._session.close()

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None,
        payload: Any,
    ) -> Any:
        logger.debug(
            "api_request",
            method=method,
            url=url,
            headers=redact_headers(headers),
            body=payload,
        )

        try:
            response = self._session.request(
                method=method,
                url=url,
                headers=headers,
                json=payload,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.error("api_connection_error", method=method, url=url, error=str(exc))
            raise ApiError(0, "Erro de conexão. Verifique sua rede.") from exc

        body = self._parse_body(response)

        if not response.ok:
            error = error_from_response(response.status_code, body)
            logger.error(
                "api_response_error",
                method=method,
                url=url,
                status=response.status_code,
                error_code=error.error_code,
                body=body,
            )
            raise error

        logger.debug("api_response", method=method, url=url, status=response.status_code)
        return body

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
