"""
WebHDFS Python客户端
通过HTTP REST接口操作HDFS文件系统
"""

__version__ = "1.0.0"
__author__ = "webhdfs-client Team"

from .core.web_hdfs import WebHDFS
from .domain.connection_info import ConnectionInfo
from .domain.dispatch_result import DispatchOutcome, DispatchResult
from .domain.file_status import FileStatus
from .domain.file_type import FileType
from .domain.response_mode import HttpVerb, ResponseMode
from .exceptions import ProtocolViolationError, WebHdfsError
from .util.http_client_util import HttpClientUtil

__all__ = [
    'WebHDFS',
    'ConnectionInfo',
    'DispatchOutcome',
    'DispatchResult',
    'FileStatus',
    'FileType',
    'HttpVerb',
    'ResponseMode',
    'HttpClientUtil',
    'WebHdfsError',
    'ProtocolViolationError'
]
