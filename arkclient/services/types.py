from dataclasses import dataclass

import typing

import aiohttp


@dataclass
class ApiResponse:
    response: aiohttp.ClientResponse
    data: typing.Any = None

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def ok(self) -> bool:
        return 200 <= self.response.status < 300
