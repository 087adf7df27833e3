"""
请求分发结果类
"""

from enum import Enum
from typing import Any, Dict, Optional
from .response_mode import ResponseMode


class DispatchOutcome(Enum):
    """分发结果分类"""
    OK = "ok"
    TRANSPORT_ERROR = "transport_error"
    PROTOCOL_ERROR = "protocol_error"
    UNEXPECTED_STATUS = "unexpected_status"
    MALFORMED_BODY = "malformed_body"
    
    def __str__(self):
        return self.name


class DispatchResult:
    """
    一次分发的结果
    
    不同响应模式使用不同字段：
    RAW -> body, JSON -> data, STATUS_ONLY/REDIRECTED_WRITE -> status_code
    """
    
    def __init__(self, mode: ResponseMode, outcome: DispatchOutcome,
                 status_code: Optional[int] = None, body: Optional[bytes] = None,
                 data: Optional[Dict[str, Any]] = None, error: Optional[str] = None):
        self.mode: ResponseMode = mode
        self.outcome: DispatchOutcome = outcome
        self.status_code: Optional[int] = status_code
        self.body: Optional[bytes] = body
        self.data: Optional[Dict[str, Any]] = data
        self.error: Optional[str] = error
    
    @classmethod
    def failure(cls, mode: ResponseMode, outcome: DispatchOutcome, error: str,
                status_code: Optional[int] = None) -> 'DispatchResult':
        """构造失败结果"""
        return cls(mode, outcome, status_code=status_code, error=error)
    
    def is_ok(self) -> bool:
        """是否拿到了该模式下的有效响应"""
        return self.outcome is DispatchOutcome.OK
    
    def has_status(self, expected: int) -> bool:
        """是否拿到有效响应且状态码等于期望值"""
        return self.is_ok() and self.status_code == expected
    
    def __str__(self):
        return (f"DispatchResult{{mode={self.mode}, outcome={self.outcome}, "
                f"status_code={self.status_code}, error={self.error!r}}}")
    
    def __repr__(self):
        return self.__str__()
