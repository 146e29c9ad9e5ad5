import asyncio
import logging

import pytest

from backend.middleware.graceful_cancel import GracefulCancelMiddleware


class DummySend:
    async def __call__(self, message):
        pass


class DummyReceive:
    async def __call__(self):
        return {"type": "http.request"}


@pytest.mark.asyncio
async def test_middleware_passes_through():
    called = False

    async def app(scope, receive, send):
        nonlocal called
        called = True

    mw = GracefulCancelMiddleware(app)

    await mw({"type": "http", "method": "POST", "path": "/chat"}, DummyReceive(), DummySend())

    assert called is True


@pytest.mark.asyncio
async def test_middleware_absorbs_client_disconnect(caplog):
    async def app(scope, receive, send):
        raise asyncio.CancelledError()

    mw = GracefulCancelMiddleware(app)

    with caplog.at_level(logging.DEBUG, logger="foliochat.middleware"):
        # Should NOT raise CancelledError
        await mw({"type": "http", "method": "POST", "path": "/chat"}, DummyReceive(), DummySend())

    assert any("POST /chat" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_middleware_handles_scope_without_path():
    async def app(scope, receive, send):
        raise asyncio.CancelledError()

    await GracefulCancelMiddleware(app)({"type": "lifespan"}, DummyReceive(), DummySend())


@pytest.mark.asyncio
async def test_middleware_does_not_suppress_other_exceptions():
    class CustomError(Exception):
        pass

    async def app(scope, receive, send):
        raise CustomError("boom")

    mw = GracefulCancelMiddleware(app)

    with pytest.raises(CustomError):
        await mw({}, DummyReceive(), DummySend())
