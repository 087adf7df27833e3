"""
异常定义
"""


class WebHdfsError(Exception):
    """WebHDFS客户端异常基类"""


class ProtocolViolationError(WebHdfsError):
    """服务端响应不符合WebHDFS协议，例如写入时缺少或无法解析Location头"""
