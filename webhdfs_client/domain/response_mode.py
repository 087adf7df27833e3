"""
请求方式与响应处理模式枚举
"""

from enum import Enum


class HttpVerb(Enum):
    """WebHDFS使用的HTTP方法"""
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    
    def __str__(self):
        return self.value


class ResponseMode(Enum):
    """
    响应处理模式
    
    RAW: 跟随重定向，200时返回原始字节
    REDIRECTED_WRITE: 两阶段写入（307重定向后向DataNode发送数据）
    JSON: 跟随重定向，200时返回解码后的JSON对象
    STATUS_ONLY: 跟随重定向，只返回状态码
    """
    RAW = "raw"
    REDIRECTED_WRITE = "redirected_write"
    JSON = "json"
    STATUS_ONLY = "status_only"
    
    def carries_body(self) -> bool:
        """该模式是否携带请求体"""
        return self is ResponseMode.REDIRECTED_WRITE
    
    def follows_redirects(self) -> bool:
        """该模式是否自动跟随重定向"""
        return self is not ResponseMode.REDIRECTED_WRITE
    
    def __str__(self):
        return self.name
