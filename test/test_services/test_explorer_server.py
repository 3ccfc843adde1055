import asyncio
import io
from unittest import IsolatedAsyncioTestCase

from aiohttp import web

from arkclient.application import exceptions
from arkclient.client import ArkClient
from test.utils import as_namespace


class TestAgainstExplorerServer(IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.seen = []
        app = web.Application()
        app.router.add_get('/api/blocks/{id}', self.block)
        app.router.add_post('/api/transactions', self.echo)
        app.router.add_get('/api/empty', self.empty)
        app.router.add_get('/api/slow', self.slow)
        app.router.add_get('/api/peers/download', self.download)
        self.runner = web.AppRunner(app)
        await self.runner.setup()
        site = web.TCPSite(self.runner, '127.0.0.1', 0)
        await site.start()
        port = self.runner.addresses[0][1]
        self.sut = ArkClient(base_url='http://127.0.0.1:%s/api/' % port)

    async def asyncTearDown(self):
        await self.sut.close()
        await self.runner.cleanup()

    async def block(self, request):
        self.seen.append(request)
        if request.match_info['id'] == 'missing':
            return web.json_response({'error': 'Block not found'}, status=404)
        return web.json_response({'id': request.match_info['id']})

    async def echo(self, request):
        self.seen.append(request)
        return web.Response(body=await request.read(), content_type='application/json')

    async def empty(self, request):
        return web.Response(status=204)

    async def slow(self, request):
        await asyncio.sleep(1)
        return web.json_response({})

    async def download(self, request):
        return web.Response(body=b'\x00\x01' * 100000, content_type='application/octet-stream')

    async def test_get_block(self):
        res = await self.sut.two.blocks.show('123', model=as_namespace)
        self.assertEqual(res.status, 200)
        self.assertEqual(res.data.id, '123')
        request = self.seen[0]
        self.assertEqual(request.method, 'GET')
        self.assertEqual(request.path, '/api/blocks/123')
        self.assertEqual(request.headers['API-Version'], '2')
        self.assertEqual(request.headers['Content-Type'], 'application/json')
        self.assertFalse(request.can_read_body)

    async def test_not_found(self):
        res = await self.sut.one.blocks.show('missing')
        self.assertEqual(res.status, 404)
        self.assertEqual(res.data, {'error': 'Block not found'})
        self.assertEqual(self.seen[0].headers['API-Version'], '1')

    async def test_echo(self):
        body = {'transactions': [{'vendorField': '<script>é</script>', 'amount': 1}]}
        res = await self.sut.two.transactions.create(body)
        self.assertEqual(res.data, body)

    async def test_empty(self):
        res = await self.sut.send_request(2, 'GET', 'empty', model=as_namespace)
        self.assertEqual(res.status, 204)
        self.assertIsNone(res.data)

    async def test_timeout(self):
        with self.assertRaises(asyncio.TimeoutError):
            await self.sut.send_request(2, 'GET', 'slow', timeout=0.1)

    async def test_download(self):
        sink = io.BytesIO()
        response = await self.sut.one.peers.download(sink, 'download')
        self.assertEqual(response.status, 200)
        self.assertEqual(sink.getvalue(), b'\x00\x01' * 100000)

    async def test_connection_refused(self):
        self.sut.base_url = 'http://127.0.0.1:1/api/'
        with self.assertRaises(exceptions.HTTPClientException) as e:
            await self.sut.two.node.get('status')
        self.assertEqual(e.exception.url, 'http://127.0.0.1:1/api/node/status')
