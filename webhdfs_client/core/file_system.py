"""
文件系统抽象基类
持有连接信息和HTTP客户端，负责把操作请求交给请求分发器
"""

import logging
from typing import Optional
from ..domain.connection_info import ConnectionInfo
from ..domain.dispatch_result import DispatchResult
from ..domain.operation_request import OperationRequest
from ..util.http_client_util import HttpClientUtil

logger = logging.getLogger(__name__)


class FileSystem:
    """
    文件系统抽象基类
    连接信息在构造时注入，之后不再修改
    """
    
    def __init__(self, connection_info: ConnectionInfo, http_client: Optional[HttpClientUtil] = None):
        self.connection_info: ConnectionInfo = connection_info
        self.http_client: HttpClientUtil = http_client or HttpClientUtil()
    
    def _call_remote(self, request: OperationRequest) -> DispatchResult:
        """
        远程调用方法
        构造URL（附加user.name）并交给HTTP客户端执行
        """
        url = self.connection_info.build_url(request.path, request.params)
        result = self.http_client.dispatch(url, request.verb, request.mode, request.body)
        logger.debug(f"{request.get_op()} {request.path}: {result}")
        return result
