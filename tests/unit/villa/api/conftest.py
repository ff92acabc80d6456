import json
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from villa.api.app import resolve
from villa.api.container import Container


@dataclass
class FakeLambdaContext:
    function_name: str = "villa-booking-api"
    memory_limit_in_mb: int = 256
    invoked_function_arn: str = (
        "arn:aws:lambda:us-east-1:123456789012:function:villa-booking-api"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway REST (Lambda プロキシ統合) のイベントを生成する Factory fixture"""

    def _factory(
        method: str,
        path: str,
        body: dict | str | None = None,
        query: dict[str, str] | None = None,
    ) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "resource": "/api/{proxy+}",
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {"Content-Type": ["application/json"]},
            "queryStringParameters": query,
            "multiValueQueryStringParameters": (
                {key: [value] for key, value in query.items()} if query else None
            ),
            "pathParameters": {"proxy": path.removeprefix("/api/")},
            "stageVariables": None,
            "requestContext": {
                "accountId": "123456789012",
                "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
                "stage": "prod",
                "path": f"/prod{path}",
                "httpMethod": method,
                "resourcePath": "/api/{proxy+}",
                "identity": {"sourceIp": "127.0.0.1"},
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory


@pytest.fixture
def notifier():
    mock = MagicMock()
    mock.notify.return_value = True
    return mock


@pytest.fixture
def container(notifier):
    return Container.in_memory(notifier=notifier)


@pytest.fixture
def call_api(api_event, lambda_context, container):
    """API を呼び出し (ステータスコード, JSON ボディ) を返す"""

    def _call(method: str, path: str, body=None, query=None) -> tuple[int, object]:
        response = resolve(
            api_event(method, path, body=body, query=query), lambda_context, container
        )
        return response["statusCode"], json.loads(response["body"])

    return _call
