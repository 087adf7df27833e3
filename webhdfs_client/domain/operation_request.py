"""
操作请求类
"""

from typing import Any, Dict, Optional
from .response_mode import HttpVerb, ResponseMode


def _to_param(value: Any) -> str:
    """将参数值转换为WebHDFS查询字符串中的形式"""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class OperationRequest:
    """单次文件系统操作的请求描述，每次调用新建，不复用"""
    
    def __init__(self, mode: ResponseMode, verb: HttpVerb, path: str, op: str,
                 options: Optional[Dict[str, Any]] = None, body: Optional[bytes] = None):
        """
        初始化操作请求
        
        Args:
            mode: 响应处理模式
            verb: HTTP方法
            path: HDFS路径
            op: 操作码，如CREATE、LISTSTATUS
            options: 其他查询参数，值为None的参数会被忽略
            body: 请求体，仅REDIRECTED_WRITE模式允许
        """
        if not op:
            raise ValueError("Operation request requires an 'op' parameter")
        if body is not None and not mode.carries_body():
            raise ValueError(f"Mode {mode} does not accept a request body")
        if body is None and mode.carries_body():
            raise ValueError(f"Mode {mode} requires a request body")
        
        self.mode: ResponseMode = mode
        self.verb: HttpVerb = verb
        self.path: str = path
        self.body: Optional[bytes] = bytes(body) if body is not None else None
        
        # op始终排在第一位
        self.params: Dict[str, str] = {"op": op}
        for key, value in (options or {}).items():
            if key == "op" or value is None:
                continue
            self.params[key] = _to_param(value)
    
    def get_op(self) -> str:
        """获取操作码"""
        return self.params["op"]
    
    def __str__(self):
        body_size = len(self.body) if self.body is not None else None
        return (f"OperationRequest{{op='{self.get_op()}', verb={self.verb}, mode={self.mode}, "
                f"path='{self.path}', params={self.params}, body_size={body_size}}}")
    
    def __repr__(self):
        return self.__str__()
