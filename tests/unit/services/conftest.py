import itertools
import json
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from services.container import get_container
from services.shared.domain import IdGenerator


class SequentialIdGenerator(IdGenerator):
    """採番結果を予測できる IdGenerator（テスト用）"""

    def __init__(self, pnrs: list[str] | None = None) -> None:
        self._counter = itertools.count(1)
        self._pnrs = iter(pnrs) if pnrs is not None else None

    def _next(self) -> int:
        return next(self._counter)

    def booking_id(self) -> str:
        return f"booking-{self._next()}"

    def pnr(self) -> str:
        if self._pnrs is not None:
            return next(self._pnrs)
        return f"PNR{100000 + self._next()}"

    def ticket_id(self) -> str:
        return f"ticket-{self._next()}"

    def boarding_token(self) -> str:
        return f"token-{self._next()}"

    def support_ticket_id(self) -> str:
        return f"TKT{self._next():06d}"


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def id_generator():
    """採番順が決まっている IdGenerator フィクスチャ"""
    return SequentialIdGenerator()


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def lambda_context():
    """Logger.inject_lambda_context が参照する LambdaContext のダミー"""
    return FakeLambdaContext()


@pytest.fixture
def fresh_container(monkeypatch):
    """ハンドラーが参照する Container を作り直す"""
    for name in ("FLIGHT_SEED_PATH", "SEAT_NUMBER", "BOARDING_GATE"):
        monkeypatch.delenv(name, raising=False)
    get_container.cache_clear()
    yield get_container()
    get_container.cache_clear()


@pytest.fixture
def api_event():
    """API Gateway HTTP API（ペイロード v2）のイベントを生成する"""

    def _factory(
        method: str = "POST",
        path: str = "/",
        body: dict | str | None = None,
        query: dict | None = None,
        path_parameters: dict | None = None,
    ) -> dict:
        event: dict = {
            "version": "2.0",
            "routeKey": f"{method} {path}",
            "rawPath": path,
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "http": {"method": method, "path": path},
                "requestId": "test-request",
                "stage": "$default",
            },
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)
        if query is not None:
            event["queryStringParameters"] = query
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        return event

    return _factory


@pytest.fixture
def make_id_generator():
    """PNR の採番結果を指定できる IdGenerator を生成する"""

    def _factory(pnrs: list[str] | None = None) -> SequentialIdGenerator:
        return SequentialIdGenerator(pnrs=pnrs)

    return _factory
