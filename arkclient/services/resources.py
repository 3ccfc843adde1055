import typing
from urllib.parse import quote

from arkclient.application.logging_factory import Logger
from arkclient.services.http_client import HTTPClient
from arkclient.services.types import ApiResponse

V1_RESOURCES = (
    'accounts',
    'blocks',
    'delegates',
    'loader',
    'peers',
    'signatures',
    'transactions'
)

V2_RESOURCES = (
    'blocks',
    'delegates',
    'node',
    'peers',
    'transactions',
    'votes',
    'wallets'
)


class Resource:
    """
    One explorer resource (blocks, wallets...) of one API version.

    Every call is delegated to the shared dispatcher: the resource only knows its
    version and its path, relative to the client base url.

    v1 actions are plain path segments:
        await client.one.accounts.get('getBalance', address='AUexKjGtgsSpVzPLs6jNMM6vJ6znEVTQWK')
    v2 relations are nested under the identifier:
        await client.two.wallets.relation('genesis_1', 'transactions', limit=10)
    """
    def __init__(self, dispatcher: HTTPClient, version: int, path: str):
        self._dispatcher = dispatcher
        self.version = version
        self.path = path.strip('/')

    def __repr__(self):
        return '<Resource v%s %s>' % (self.version, self.path)

    def _url(self, action: str = '', identifier=None, relation: str = '') -> str:
        parts = [self.path]
        identifier is not None and parts.append(quote(str(identifier), safe=''))
        action and parts.append(quote(action.strip('/'), safe='/'))
        relation and parts.append(quote(relation.strip('/'), safe='/'))
        return '/'.join(parts)

    async def _call(self, method: str, path: str, body=None, model: typing.Callable = None,
                    params: typing.Dict = None, timeout: float = None) -> ApiResponse:
        Logger.resources.debug('v%s %s %s', self.version, method, path)
        return await self._dispatcher.send_request(
            self.version, method, path, body=body, model=model, params=params, timeout=timeout
        )

    def child(self, name: str) -> 'Resource':
        return Resource(self._dispatcher, self.version, self._url(action=name))

    async def all(self, model: typing.Callable = None, timeout: float = None, **params) -> ApiResponse:
        return await self._call('GET', self._url(), model=model, params=params, timeout=timeout)

    async def show(self, identifier, model: typing.Callable = None, timeout: float = None) -> ApiResponse:
        return await self._call('GET', self._url(identifier=identifier), model=model, timeout=timeout)

    async def get(self, action: str, model: typing.Callable = None, timeout: float = None, **params) -> ApiResponse:
        return await self._call('GET', self._url(action=action), model=model, params=params, timeout=timeout)

    async def relation(self, identifier, name: str, model: typing.Callable = None, timeout: float = None,
                       **params) -> ApiResponse:
        return await self._call(
            'GET', self._url(identifier=identifier, relation=name), model=model, params=params, timeout=timeout
        )

    async def search(self, criteria: typing.Dict, model: typing.Callable = None, timeout: float = None,
                     **params) -> ApiResponse:
        return await self._call(
            'POST', self._url(action='search'), body=criteria, model=model, params=params, timeout=timeout
        )

    async def create(self, payload, model: typing.Callable = None, timeout: float = None) -> ApiResponse:
        return await self._call('POST', self._url(), body=payload, model=model, timeout=timeout)

    async def download(self, sink, action: str = '', timeout: float = None, **params):
        path = self._url(action=action)
        Logger.resources.debug('v%s GET %s (raw)', self.version, path)
        return await self._dispatcher.send_request_raw(
            self.version, 'GET', path, sink, params=params, timeout=timeout
        )


class ApiVersion:
    def __init__(self, dispatcher: HTTPClient, version: int, resources: typing.Iterable[str]):
        self.version = version
        self.resources = tuple(resources)
        for name in self.resources:
            setattr(self, name, Resource(dispatcher, version, name))

    def __repr__(self):
        return '<ApiVersion %s: %s>' % (self.version, ', '.join(self.resources))

    def resource(self, name: str) -> Resource:
        if name not in self.resources:
            raise AttributeError('API v%s has no resource %r' % (self.version, name))
        return getattr(self, name)
