"""
测试公共fixture
"""

from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest


def make_response(status_code: int, content: bytes = b"", json_data: Any = None,
                  headers: Optional[Dict[str, str]] = None, json_error: Optional[Exception] = None) -> Mock:
    """构造模拟的requests.Response"""
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.headers = headers or {}
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def mock_session():
    """模拟的requests.Session"""
    return Mock()


@pytest.fixture
def session_factory(mock_session):
    """每次调用返回同一个模拟Session，并记录调用次数"""
    return Mock(return_value=mock_session)
