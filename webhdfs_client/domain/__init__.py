"""
数据模型模块 - 定义连接信息、请求、结果和文件状态
"""

from .connection_info import ConnectionInfo
from .dispatch_result import DispatchOutcome, DispatchResult
from .file_status import FileStatus
from .file_type import FileType
from .operation_request import OperationRequest
from .response_mode import HttpVerb, ResponseMode

__all__ = [
    'ConnectionInfo',
    'DispatchOutcome',
    'DispatchResult',
    'FileStatus',
    'FileType',
    'OperationRequest',
    'HttpVerb',
    'ResponseMode'
]
