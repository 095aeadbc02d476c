import json

import httpx


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def respond(status_code: int, payload=None, text: str = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if text is not None:
            return httpx.Response(status_code, text=text)
        if payload is not None:
            return httpx.Response(status_code, content=json.dumps(payload).encode())
        return httpx.Response(status_code)
    return handler


def refuse(cause: str):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(cause, request=request)
    return handler
