from __future__ import annotations

import os
import tempfile

import pytest

# Keep test runs from writing into ~/.euTestData
os.environ.setdefault("TESTDATA_LOG_DIR", tempfile.mkdtemp(prefix="eutestdata-logs-"))


class FakeMCP:
    """Records functions registered through ``@mcp.tool()``."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn

        return decorator


@pytest.fixture
def fake_mcp() -> FakeMCP:
    return FakeMCP()
