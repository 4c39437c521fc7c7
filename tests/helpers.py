from typing import Any

from app.client.api_client import ApiError
from app.imports.schemas import ImportFile

VALID_CPF = "52998224725"


class FakeApiClient:
    """Records every submission; fails the calls whose 0-based index is in ``fail_on``."""

    def __init__(self, fail_on: dict[int, Exception] | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self._fail_on = fail_on or {}

    async def post(self, url: str, *, headers: dict[str, str], payload: Any) -> Any:
        index = len(self.calls)
        self.calls.append({"url": url, "headers": headers, "payload": payload})
        if index in self._fail_on:
            raise self._fail_on[index]
        return {"id": f"created-{index}"}


def csv_file(text: str, name: str = "data.csv") -> ImportFile:
    return ImportFile(name=name, content=text.encode("utf-8"))


def json_file(text: str, name: str = "data.json") -> ImportFile:
    return ImportFile(name=name, content=text.encode("utf-8"))


def api_failure(message: str, status_code: int = 400) -> ApiError:
    return ApiError(status_code, message)
