"""
连接信息类
"""

from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode


class ConnectionInfo:
    """
    NameNode连接信息
    构造后不可修改，只提供读取方法
    """
    
    URL_FORMAT = "http://{host}:{port}/webhdfs/v1{path}?{query}"
    
    def __init__(self, host: str = "localhost", port: int = 50070, user: Optional[str] = None):
        """
        初始化连接信息
        
        Args:
            host: NameNode主机地址
            port: NameNode HTTP端口
            user: 操作用户，作为user.name参数附加到每个请求
        """
        if not host:
            raise ValueError("host must not be empty")
        if not isinstance(port, int) or isinstance(port, bool) or not 0 < port < 65536:
            raise ValueError(f"Invalid port: {port!r}")
        self._host: str = host
        self._port: int = port
        self._user: Optional[str] = user or None
    
    @property
    def host(self) -> str:
        return self._host
    
    @property
    def port(self) -> int:
        return self._port
    
    @property
    def user(self) -> Optional[str]:
        return self._user
    
    def get_host(self) -> str:
        """获取主机地址"""
        return self._host
    
    def get_port(self) -> int:
        """获取端口号"""
        return self._port
    
    def get_user(self) -> Optional[str]:
        """获取操作用户"""
        return self._user
    
    def get_url(self) -> str:
        """获取NameNode根URL"""
        return f"http://{self._host}:{self._port}"
    
    def build_url(self, path: str, params: Dict[str, Any]) -> str:
        """
        构造完整的WebHDFS请求URL
        
        Args:
            path: HDFS路径
            params: 查询参数（需已包含op）
            
        Returns:
            已完成百分号编码的URL
        """
        query = dict(params)
        if self._user:
            query["user.name"] = self._user
        return self.URL_FORMAT.format(
            host=self._host,
            port=self._port,
            path=quote(path, safe="/"),
            query=urlencode(query),
        )
    
    def __eq__(self, other):
        if not isinstance(other, ConnectionInfo):
            return NotImplemented
        return (self._host, self._port, self._user) == (other._host, other._port, other._user)
    
    def __hash__(self):
        return hash((self._host, self._port, self._user))
    
    def __str__(self):
        return f"ConnectionInfo{{host='{self._host}', port={self._port}, user={self._user!r}}}"
    
    def __repr__(self):
        return self.__str__()
