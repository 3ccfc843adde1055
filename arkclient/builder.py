import logging

from arkclient.application.context import Context
from arkclient.application.logging_factory import Logger
from arkclient.client import ArkClient


def build(ctx: Context = None, session=None) -> ArkClient:
    ctx = ctx if ctx is not None else Context()
    ctx.debug and Logger.root.setLevel(logging.DEBUG)
    Logger.root.debug('Building client for %s', ctx.base_url)
    return ArkClient(
        session=session,
        base_url=ctx.base_url,
        user_agent=ctx.user_agent,
        proxy=ctx.proxy,
        timeout=ctx.timeout
    )
