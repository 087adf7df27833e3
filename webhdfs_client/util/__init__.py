"""
工具模块 - HTTP请求分发和两阶段写入
"""

from .http_client_util import HttpClientUtil
from .redirected_write import RedirectedWrite, WriteState, extract_location

__all__ = [
    'HttpClientUtil',
    'RedirectedWrite',
    'WriteState',
    'extract_location'
]
