"""
HTTP客户端工具类
负责把一次文件系统操作转换为一到两次HTTP请求
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple, Union

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..domain.dispatch_result import DispatchOutcome, DispatchResult
from ..domain.response_mode import HttpVerb, ResponseMode
from .redirected_write import RedirectedWrite, WriteState

logger: logging.Logger = logging.getLogger(__name__)


class HttpClientUtil:
    """
    WebHDFS请求分发器

    每次dispatch都新建并关闭自己的Session，调用之间不共享任何状态，
    不做连接池复用，也不做自动重试。
    """

    DEFAULT_CONNECT_TIMEOUT = 4

    def __init__(self, connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
                 read_timeout: Optional[float] = None,
                 session_factory: Callable[[], requests.Session] = requests.Session):
        """
        初始化HTTP客户端

        Args:
            connect_timeout: 建立连接超时时间（秒）
            read_timeout: 读取超时时间（秒），None表示不限制
            session_factory: 创建Session的工厂函数
        """
        if connect_timeout is None or connect_timeout <= 0:
            raise ValueError(f"connect_timeout must be positive, got {connect_timeout!r}")
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self._session_factory = session_factory

    @property
    def timeout(self) -> Tuple[float, Optional[float]]:
        """requests使用的(连接超时, 读取超时)"""
        return (self.connect_timeout, self.read_timeout)

    def _new_session(self) -> requests.Session:
        """创建单次调用使用的Session"""
        session = self._session_factory()

        # 不重试，不保留连接池
        adapter: HTTPAdapter = HTTPAdapter(
            max_retries=Retry(total=0, read=False),
            pool_connections=1,
            pool_maxsize=1
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def dispatch(self, url: str, verb: Union[HttpVerb, str], mode: ResponseMode,
                 body: Optional[bytes] = None) -> DispatchResult:
        """
        执行一次文件系统操作

        Args:
            url: 已完成编码的完整URL
            verb: HTTP方法
            mode: 响应处理模式
            body: 请求体，仅REDIRECTED_WRITE模式允许且必须提供

        Returns:
            与响应模式对应的分发结果，传输层错误不会抛出
        """
        verb = HttpVerb(verb)
        mode = ResponseMode(mode)
        if mode.carries_body() and body is None:
            raise ValueError(f"Mode {mode} requires a request body")
        if not mode.carries_body() and body is not None:
            raise ValueError(f"Mode {mode} does not accept a request body")

        logger.debug(f"Dispatching {verb} {url} ({mode})")
        session = self._new_session()
        try:
            if mode is ResponseMode.REDIRECTED_WRITE:
                return self._redirected_write(session, url, verb, body)

            try:
                response = session.request(verb.value, url, allow_redirects=True, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                logger.error(f"{verb} request failed: {url}, error: {e}")
                return DispatchResult.failure(mode, DispatchOutcome.TRANSPORT_ERROR, str(e))

            logger.debug(f"{verb} {url} -> {response.status_code}")
            if mode is ResponseMode.RAW:
                return self._raw_result(url, response)
            if mode is ResponseMode.JSON:
                return self._json_result(url, response)
            return DispatchResult(mode, DispatchOutcome.OK, status_code=response.status_code)
        finally:
            session.close()

    def _raw_result(self, url: str, response) -> DispatchResult:
        """RAW模式：200时返回原始字节"""
        if response.status_code != 200:
            logger.warning(f"Read failed: {url}, status: {response.status_code}")
            return DispatchResult.failure(ResponseMode.RAW, DispatchOutcome.UNEXPECTED_STATUS,
                                          f"Unexpected status {response.status_code}",
                                          status_code=response.status_code)
        return DispatchResult(ResponseMode.RAW, DispatchOutcome.OK,
                              status_code=response.status_code, body=response.content)

    def _json_result(self, url: str, response) -> DispatchResult:
        """JSON模式：200时返回解码后的JSON对象"""
        if response.status_code != 200:
            logger.warning(f"Request failed: {url}, status: {response.status_code}")
            return DispatchResult.failure(ResponseMode.JSON, DispatchOutcome.UNEXPECTED_STATUS,
                                          f"Unexpected status {response.status_code}",
                                          status_code=response.status_code)

        try:
            data: Any = response.json()
        except ValueError as e:
            logger.error(f"Malformed JSON body: {url}, error: {e}")
            return DispatchResult.failure(ResponseMode.JSON, DispatchOutcome.MALFORMED_BODY,
                                          f"Malformed JSON body: {e}", status_code=response.status_code)

        if not isinstance(data, dict):
            logger.error(f"JSON body is not an object: {url}, got {type(data).__name__}")
            return DispatchResult.failure(ResponseMode.JSON, DispatchOutcome.MALFORMED_BODY,
                                          f"Expected a JSON object, got {type(data).__name__}",
                                          status_code=response.status_code)

        return DispatchResult(ResponseMode.JSON, DispatchOutcome.OK,
                              status_code=response.status_code, data=data)

    def _redirected_write(self, session: requests.Session, url: str, verb: HttpVerb,
                          body: bytes) -> DispatchResult:
        """REDIRECTED_WRITE模式：NameNode返回307后把数据发送到DataNode"""
        handshake = RedirectedWrite(verb, url, body)

        try:
            response = session.request(timeout=self.timeout, **handshake.redirect_request())
        except requests.exceptions.RequestException as e:
            logger.error(f"{verb} request failed: {url}, error: {e}")
            handshake.fail(DispatchOutcome.TRANSPORT_ERROR, str(e))
            return handshake.to_result()

        if handshake.on_redirect_response(response) is WriteState.FAILED:
            return handshake.to_result()

        payload: Dict[str, Any] = handshake.payload_request()
        try:
            response = session.request(timeout=self.timeout, **payload)
        except requests.exceptions.RequestException as e:
            logger.error(f"{verb} payload upload failed: {payload['url']}, error: {e}")
            handshake.fail(DispatchOutcome.TRANSPORT_ERROR, str(e))
            return handshake.to_result()

        handshake.on_payload_response(response)
        return handshake.to_result()
