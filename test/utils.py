import json
from types import SimpleNamespace


def as_namespace(data):
    return SimpleNamespace(**data)


class FakeContent:
    def __init__(self, body: bytes):
        self._body = body

    async def iter_chunked(self, n: int):
        for i in range(0, len(self._body), n):
            yield self._body[i:i + n]


class FakeResponse:
    def __init__(self, status=200, body=b'', headers=None):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode()
        self.status = status
        self.headers = headers or {'Content-Type': 'application/json'}
        self.body = body
        self.content = FakeContent(body)
        self.released = 0

    async def read(self):
        return self.body

    def release(self):
        self.released += 1


class FakeSession:
    """
    records the outgoing requests.
    answers with `response`, raises `error`, or echoes the request body when `echo` is set.
    """
    def __init__(self, response: FakeResponse = None, error: Exception = None, echo=False, on_request=None):
        self.response = response if response is not None else FakeResponse()
        self.error = error
        self.echo = echo
        self.on_request = on_request
        self.requests = []
        self.closed = False

    async def request(self, method, url, data=None, headers=None):
        self.requests.append({'method': method, 'url': str(url), 'data': data, 'headers': headers})
        if self.on_request:
            await self.on_request()
        if self.error:
            raise self.error
        if self.echo:
            self.response = FakeResponse(200, data or b'')
        return self.response

    async def close(self):
        self.closed = True
