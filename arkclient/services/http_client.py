import asyncio
import inspect
import json
import typing

import aiohttp
import async_timeout
import yarl
from aiohttp_socks import ProxyConnector

from arkclient.application import exceptions, settings
from arkclient.application.logging_factory import Logger
from arkclient.services.types import ApiResponse


class HTTPClient:
    """
    Request dispatcher.

    Turns (api version, verb, relative path, body) into a single round-trip against the
    explorer, using one aiohttp session shared by every resource of the client.
    The session is created on first use unless one is given, and every change to it goes
    through the session lock.
    """
    def __init__(self, baseurl=settings.DEFAULT_BASE_URL, session: aiohttp.ClientSession = None,
                 user_agent=settings.USER_AGENT, proxy: str = None, timeout: float = None):
        self.baseurl = baseurl
        self.user_agent = user_agent
        self.proxy = proxy
        self.timeout = timeout
        self._session = session
        self._owns_session = False
        self._session_lock = asyncio.Lock()

    @property
    def session(self) -> typing.Optional[aiohttp.ClientSession]:
        return self._session

    def _new_session(self) -> aiohttp.ClientSession:
        connector = self.proxy and ProxyConnector.from_url(self.proxy)
        return aiohttp.ClientSession(connector=connector or None)

    async def get_session(self) -> aiohttp.ClientSession:
        async with self._session_lock:
            if self._session is None or (self._owns_session and self._session.closed):
                self._session = self._new_session()
                self._owns_session = True
            return self._session

    async def set_session(self, session: aiohttp.ClientSession):
        async with self._session_lock:
            previous = self._session
            if previous is not None and previous is not session and self._owns_session:
                await previous.close()
            self._session = session
            self._owns_session = False

    async def close(self):
        async with self._session_lock:
            if self._session is not None and self._owns_session:
                await self._session.close()
                self._session = None
                self._owns_session = False

    def resolve(self, path: str, params: typing.Dict = None) -> yarl.URL:
        try:
            base = yarl.URL(self.baseurl)
        except (TypeError, ValueError) as e:
            raise exceptions.ConfigurationException('Invalid base url: %r' % self.baseurl) from e
        if not base.is_absolute() or not base.path.endswith('/'):
            raise exceptions.ConfigurationException(
                'Base url must be absolute and have a trailing slash, but %r does not' % self.baseurl
            )
        try:
            url = base.join(yarl.URL(path))
            params = params and {
                k: json.dumps(v) if isinstance(v, bool) else v for k, v in params.items() if v is not None
            }
            if params:
                url = url.update_query(params)
        except (TypeError, ValueError) as e:
            raise exceptions.URLResolutionException('Cannot resolve %r against %s: %s' % (path, base, e)) from e
        return url

    @staticmethod
    def serialize(body) -> typing.Optional[bytes]:
        if body is None:
            return None
        try:
            return json.dumps(body, ensure_ascii=False).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise exceptions.SerializationException('Cannot serialize request body: %s' % e) from e

    @staticmethod
    def decode(response: aiohttp.ClientResponse, body: bytes, model: typing.Callable = None):
        if not body.strip():
            return None
        try:
            data = json.loads(body)
        except ValueError as e:
            raise exceptions.DecodeException(
                'Invalid JSON response (HTTP %s): %s' % (response.status, e), response=response
            ) from e
        if model is None:
            return data
        try:
            return model(data)
        except (TypeError, ValueError, KeyError) as e:
            raise exceptions.DecodeException(
                'Cannot build %s from response (HTTP %s): %s' % (getattr(model, '__name__', model), response.status, e),
                response=response
            ) from e

    def headers(self, version: int) -> typing.Dict:
        return {
            'Content-Type': settings.CONTENT_TYPE,
            settings.API_VERSION_HEADER: str(version),
            'User-Agent': self.user_agent
        }

    @staticmethod
    def _readable_url(error: Exception, url: yarl.URL) -> str:
        request_info = getattr(error, 'request_info', None)
        candidate = getattr(error, 'url', None) or (request_info and request_info.real_url) or url
        try:
            return yarl.URL(str(candidate)).human_repr()
        except (TypeError, ValueError):
            return str(candidate)

    def _transport_error(self, error: aiohttp.ClientError, url: yarl.URL) -> BaseException:
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            Logger.client.debug('Call cancelled: %s', url.human_repr())
            return asyncio.CancelledError()
        readable = self._readable_url(error, url)
        Logger.client.exception('Exception on call: %s', readable)
        return exceptions.HTTPClientException(
            '%s: %s' % (readable, str(error) or error.__class__.__name__), url=readable
        )

    async def _execute(self, version: int, method: str, url: yarl.URL, data: typing.Optional[bytes],
                       timeout: typing.Optional[float], consume: typing.Callable):
        session = await self.get_session()
        timeout = timeout if timeout is not None else self.timeout
        Logger.client.debug('%s %s (API-Version: %s)', method, url.human_repr(), version)
        try:
            async with async_timeout.timeout(timeout):
                response = await session.request(method, url, data=data, headers=self.headers(version))
                try:
                    result = await consume(response)
                finally:
                    response.release()
        except aiohttp.ClientError as e:
            raise self._transport_error(e, url) from e
        Logger.client.debug('%s %s: HTTP %s', method, url.human_repr(), response.status)
        return response, result

    @staticmethod
    async def _read(response: aiohttp.ClientResponse) -> bytes:
        return await response.read()

    async def send_request(self, version: int, method: str, path: str, body=None, model: typing.Callable = None,
                           params: typing.Dict = None, timeout: float = None) -> ApiResponse:
        url = self.resolve(path, params)
        data = self.serialize(body)
        response, content = await self._execute(version, method, url, data, timeout, self._read)
        return ApiResponse(response=response, data=self.decode(response, content, model))

    async def send_request_raw(self, version: int, method: str, path: str, sink, body=None,
                               params: typing.Dict = None, timeout: float = None) -> aiohttp.ClientResponse:
        url = self.resolve(path, params)
        data = self.serialize(body)

        async def stream(response):
            async for chunk in response.content.iter_chunked(settings.CHUNK_SIZE):
                written = sink.write(chunk)
                if inspect.isawaitable(written):
                    await written

        response, _ = await self._execute(version, method, url, data, timeout, stream)
        return response
