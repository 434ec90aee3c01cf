import logging
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import colorama
import pytest
import pytest_asyncio
from dotenv import load_dotenv

load_dotenv()

from workshop_core.logging_config import SensitiveDataFilter  # noqa: E402


@pytest_asyncio.fixture
async def session():
    async with aiohttp.ClientSession() as session:
        yield session


@pytest.fixture
def mock_session():
    """
    Builds a MagicMock standing in for aiohttp.ClientSession.
    `session.post(...)` is usable as an async context manager yielding a response
    with the given status and text body, or raises `error` when one is given.
    """

    def _build(status: int = 200, body: str = "", error: Exception | None = None):
        resp = MagicMock()
        resp.status = status
        resp.text = AsyncMock(return_value=body)

        request_ctx = MagicMock()
        request_ctx.__aenter__ = AsyncMock(return_value=resp)
        request_ctx.__aexit__ = AsyncMock(return_value=False)

        session = MagicMock()
        if error is not None:
            session.post = MagicMock(side_effect=error)
        else:
            session.post = MagicMock(return_value=request_ctx)
        return session

    return _build


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    filters, level = root.filters[:], root.level
    yield root
    for handler in root.handlers[:]:
        if any(isinstance(f, SensitiveDataFilter) for f in handler.filters):
            root.removeHandler(handler)
            handler.close()
    root.filters[:] = filters
    root.setLevel(level)
    colorama.deinit()
