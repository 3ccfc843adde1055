import typing

import aiohttp

from arkclient.application import exceptions, settings
from arkclient.services.http_client import HTTPClient
from arkclient.services.resources import ApiVersion, V1_RESOURCES, V2_RESOURCES
from arkclient.services.types import ApiResponse


class ArkClient:
    """
    Client handle for the ARK explorer API.

    Owns the base url and the transport (through the dispatcher), and one proxy per
    resource and API version:

        async with ArkClient() as client:
            res = await client.two.blocks.show('123')
            res.status, res.data

    A session given by the caller is used as is and never closed by the client.
    """
    def __init__(self, session: aiohttp.ClientSession = None, base_url: str = settings.DEFAULT_BASE_URL,
                 user_agent: str = settings.USER_AGENT, proxy: str = None, timeout: float = None):
        self.http = HTTPClient(
            baseurl=base_url, session=session, user_agent=user_agent, proxy=proxy, timeout=timeout
        )
        self.one = ApiVersion(self.http, 1, V1_RESOURCES)
        self.two = ApiVersion(self.http, 2, V2_RESOURCES)

    @property
    def base_url(self) -> str:
        return self.http.baseurl

    @base_url.setter
    def base_url(self, value: str):
        self.http.baseurl = value

    def version(self, number: int) -> ApiVersion:
        try:
            return {1: self.one, 2: self.two}[number]
        except KeyError:
            raise exceptions.ConfigurationException(
                'Unknown API version %r, available: %s' % (number, settings.API_VERSIONS)
            ) from None

    async def send_request(self, version: int, method: str, path: str, body=None, model: typing.Callable = None,
                           params: typing.Dict = None, timeout: float = None) -> ApiResponse:
        return await self.http.send_request(
            version, method, path, body=body, model=model, params=params, timeout=timeout
        )

    async def send_request_raw(self, version: int, method: str, path: str, sink, body=None,
                               params: typing.Dict = None, timeout: float = None) -> aiohttp.ClientResponse:
        return await self.http.send_request_raw(
            version, method, path, sink, body=body, params=params, timeout=timeout
        )

    async def set_session(self, session: aiohttp.ClientSession):
        await self.http.set_session(session)

    async def close(self):
        await self.http.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()
