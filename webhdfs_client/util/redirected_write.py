"""
两阶段写入（CREATE/APPEND）状态机

AWAITING_REDIRECT -> SENDING_PAYLOAD -> DONE
        |                   |
        +-------------------+-> FAILED

阶段一向NameNode发送不带数据的请求并禁止自动重定向，期望得到307和Location头；
阶段二将数据发送到Location指向的DataNode，返回阶段二的状态码。
"""

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from requests.structures import CaseInsensitiveDict  # type: ignore
from urllib3.exceptions import LocationParseError  # type: ignore
from urllib3.util import parse_url  # type: ignore

from ..domain.dispatch_result import DispatchOutcome, DispatchResult
from ..domain.response_mode import HttpVerb, ResponseMode
from ..exceptions import ProtocolViolationError

logger: logging.Logger = logging.getLogger(__name__)

# 阶段一未拿到307时返回的状态码，不会与任何成功状态码混淆
SYNTHETIC_FAILURE_STATUS = 400

REDIRECT_STATUS = 307

PAYLOAD_CONTENT_TYPE = "application/octet-stream"


class WriteState(Enum):
    """两阶段写入状态"""
    AWAITING_REDIRECT = "awaiting_redirect"
    SENDING_PAYLOAD = "sending_payload"
    DONE = "done"
    FAILED = "failed"
    
    def __str__(self):
        return self.name


def extract_location(headers: Optional[Mapping[str, str]]) -> str:
    """
    从阶段一响应头中解析DataNode地址
    
    Args:
        headers: 响应头
        
    Returns:
        去除首尾空白后的绝对URL
        
    Raises:
        ProtocolViolationError: Location缺失或格式错误
    """
    raw = CaseInsensitiveDict(headers or {}).get("Location")
    if raw is None:
        raise ProtocolViolationError("Redirect response has no Location header")
    
    location = raw.strip()
    if not location or any(ch.isspace() for ch in location):
        raise ProtocolViolationError(f"Malformed Location header: {raw!r}")
    
    try:
        parsed = parse_url(location)
    except LocationParseError as e:
        raise ProtocolViolationError(f"Malformed Location header: {raw!r}") from e
    
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ProtocolViolationError(f"Location is not an absolute HTTP URL: {raw!r}")
    return location


class RedirectedWrite:
    """
    单次两阶段写入的状态机
    
    每次写入新建一个实例，各阶段的转换可以单独调用，
    由调用方负责实际发送请求。
    """
    
    def __init__(self, verb: HttpVerb, url: str, body: bytes):
        """
        初始化两阶段写入
        
        Args:
            verb: HTTP方法，CREATE为PUT，APPEND为POST，两个阶段使用同一方法
            url: NameNode上的请求URL
            body: 要写入的数据
        """
        self.verb: HttpVerb = verb
        self.url: str = url
        self.body: bytes = body
        self.state: WriteState = WriteState.AWAITING_REDIRECT
        self.location: Optional[str] = None
        self.status_code: Optional[int] = None
        self.outcome: Optional[DispatchOutcome] = None
        self.error: Optional[str] = None
    
    def _require(self, state: WriteState):
        if self.state is not state:
            raise RuntimeError(f"Redirected write is in state {self.state}, expected {state}")
    
    def redirect_request(self) -> Dict[str, Any]:
        """阶段一请求参数：不带数据，不跟随重定向"""
        self._require(WriteState.AWAITING_REDIRECT)
        return {
            "method": self.verb.value,
            "url": self.url,
            "allow_redirects": False,
        }
    
    def on_redirect_response(self, response) -> WriteState:
        """
        处理阶段一响应
        
        Args:
            response: 带有status_code和headers的响应对象
            
        Returns:
            转换后的状态
        """
        self._require(WriteState.AWAITING_REDIRECT)
        
        if response.status_code != REDIRECT_STATUS:
            logger.warning(f"Expected {REDIRECT_STATUS} from name node, got {response.status_code}: {self.url}")
            return self.fail(DispatchOutcome.UNEXPECTED_STATUS,
                             f"Expected {REDIRECT_STATUS} redirect, got {response.status_code}",
                             SYNTHETIC_FAILURE_STATUS)
        
        try:
            self.location = extract_location(response.headers)
        except ProtocolViolationError as e:
            logger.error(f"Protocol violation during redirected write: {self.url}, error: {e}")
            return self.fail(DispatchOutcome.PROTOCOL_ERROR, str(e), SYNTHETIC_FAILURE_STATUS)
        
        logger.debug(f"Name node redirected {self.verb} to {self.location}")
        self.state = WriteState.SENDING_PAYLOAD
        return self.state
    
    def payload_request(self) -> Dict[str, Any]:
        """阶段二请求参数：数据作为请求体发送到DataNode，不跟随重定向"""
        self._require(WriteState.SENDING_PAYLOAD)
        return {
            "method": self.verb.value,
            "url": self.location,
            "data": self.body,
            "headers": {
                "Content-Type": PAYLOAD_CONTENT_TYPE,
                "Content-Length": str(len(self.body)),
            },
            "allow_redirects": False,
        }
    
    def on_payload_response(self, response) -> WriteState:
        """处理阶段二响应，状态码原样保留"""
        self._require(WriteState.SENDING_PAYLOAD)
        self.status_code = response.status_code
        self.outcome = DispatchOutcome.OK
        self.state = WriteState.DONE
        logger.debug(f"Data node answered {self.status_code} for {len(self.body)} bytes: {self.location}")
        return self.state
    
    def fail(self, outcome: DispatchOutcome, error: str, status_code: Optional[int] = None) -> WriteState:
        """进入失败状态"""
        if self.state in (WriteState.DONE, WriteState.FAILED):
            raise RuntimeError(f"Redirected write already finished in state {self.state}")
        self.outcome = outcome
        self.error = error
        self.status_code = status_code
        self.state = WriteState.FAILED
        return self.state
    
    def is_finished(self) -> bool:
        return self.state in (WriteState.DONE, WriteState.FAILED)
    
    def to_result(self) -> DispatchResult:
        """将最终状态转换为分发结果"""
        if not self.is_finished():
            raise RuntimeError(f"Redirected write not finished, state {self.state}")
        return DispatchResult(
            ResponseMode.REDIRECTED_WRITE,
            self.outcome,
            status_code=self.status_code,
            error=self.error,
        )
