from __future__ import annotations

import pytest


@pytest.fixture
def execute_request():
    def build(tool_name, inputs, _id="req-1"):
        return {"mcp_version": "0.1.0", "id": _id, "method": "execute", "toolName": tool_name, "inputs": inputs}

    return build
