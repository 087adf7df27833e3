"""
WebHDFS客户端主类
每个文件系统操作对应一个方法，失败时返回False/None/空字符串，不抛出异常
"""

import logging
from typing import Any, Dict, List, Optional
from .file_system import FileSystem
from ..domain.connection_info import ConnectionInfo
from ..domain.dispatch_result import DispatchResult
from ..domain.file_status import FileStatus
from ..domain.operation_request import OperationRequest
from ..domain.response_mode import HttpVerb, ResponseMode
from ..util.http_client_util import HttpClientUtil

logger = logging.getLogger(__name__)


class WebHDFS(FileSystem):
    """WebHDFS客户端主类"""

    def __init__(self, host: str = "localhost", port: int = 50070, user: Optional[str] = None,
                 connect_timeout: float = HttpClientUtil.DEFAULT_CONNECT_TIMEOUT,
                 read_timeout: Optional[float] = None,
                 http_client: Optional[HttpClientUtil] = None):
        """
        初始化WebHDFS客户端

        Args:
            host: NameNode主机地址
            port: NameNode HTTP端口
            user: 操作用户（user.name）
            connect_timeout: 建立连接超时时间（秒）
            read_timeout: 读取超时时间（秒）
            http_client: 自定义HTTP客户端，提供时忽略超时参数
        """
        super().__init__(
            ConnectionInfo(host=host, port=port, user=user),
            http_client or HttpClientUtil(connect_timeout=connect_timeout, read_timeout=read_timeout)
        )
        logger.info(f"Initialized WebHDFS client for {self.connection_info.get_url()}")

    def _request(self, mode: ResponseMode, verb: HttpVerb, path: str, op: str,
                 options: Optional[Dict[str, Any]] = None, body: Optional[bytes] = None) -> DispatchResult:
        return self._call_remote(OperationRequest(mode, verb, path, op, options, body))

    @staticmethod
    def _boolean(result: DispatchResult) -> bool:
        """解码结果中的boolean字段严格为True时才算成功"""
        return result.is_ok() and result.data is not None and result.data.get("boolean") is True

    def create(self, path: str, data: bytes, **options) -> bool:
        """
        创建并写入文件

        Args:
            path: HDFS文件路径
            data: 文件内容
            **options: overwrite、blocksize、replication、permission、buffersize等

        Returns:
            DataNode返回201时为True
        """
        result = self._request(ResponseMode.REDIRECTED_WRITE, HttpVerb.PUT, path, "CREATE", options, data)
        success = result.has_status(201)
        if success:
            logger.info(f"Created file: {path} ({len(data)} bytes)")
        else:
            logger.warning(f"Failed to create file {path}: {result}")
        return success

    def append(self, path: str, data: bytes, buffersize: Optional[int] = None) -> bool:
        """
        追加写入文件

        Args:
            path: HDFS文件路径
            data: 追加内容
            buffersize: 缓冲区大小，未设置时使用数据长度

        Returns:
            DataNode返回200时为True
        """
        buffersize = buffersize or len(data)
        result = self._request(ResponseMode.REDIRECTED_WRITE, HttpVerb.POST, path, "APPEND",
                               {"buffersize": buffersize}, data)
        success = result.has_status(200)
        if success:
            logger.info(f"Appended {len(data)} bytes to {path}")
        else:
            logger.warning(f"Failed to append to {path}: {result}")
        return success

    def open(self, path: str, **options) -> Optional[bytes]:
        """
        读取文件

        Args:
            path: HDFS文件路径
            **options: offset、length、buffersize

        Returns:
            文件内容，失败时为None
        """
        result = self._request(ResponseMode.RAW, HttpVerb.GET, path, "OPEN", options)
        return result.body if result.is_ok() else None

    def mkdir(self, path: str, permission: Any = 755) -> bool:
        """
        创建目录（包括不存在的父目录）

        Args:
            path: 目录路径
            permission: 八进制权限
        """
        result = self._request(ResponseMode.JSON, HttpVerb.PUT, path, "MKDIRS", {"permission": permission})
        success = self._boolean(result)
        if success:
            logger.info(f"Created directory: {path}")
        return success

    def rename(self, path: str, destination: str) -> bool:
        """重命名文件或目录"""
        result = self._request(ResponseMode.JSON, HttpVerb.PUT, path, "RENAME", {"destination": destination})
        success = self._boolean(result)
        if success:
            logger.info(f"Renamed {path} -> {destination}")
        return success

    def delete(self, path: str, recursive: bool = False) -> bool:
        """
        删除文件或目录

        Args:
            path: 文件或目录路径
            recursive: 是否递归删除
        """
        result = self._request(ResponseMode.JSON, HttpVerb.DELETE, path, "DELETE",
                               {"recursive": bool(recursive)})
        success = self._boolean(result)
        if success:
            logger.info(f"Deleted: {path}")
        return success

    def stat(self, path: str) -> Optional[Dict[str, Any]]:
        """获取文件状态，返回原始JSON对象，失败时为None"""
        result = self._request(ResponseMode.JSON, HttpVerb.GET, path, "GETFILESTATUS")
        return result.data if result.is_ok() else None

    def list_status(self, path: str) -> Optional[Dict[str, Any]]:
        """列出目录，返回原始JSON对象，失败时为None"""
        result = self._request(ResponseMode.JSON, HttpVerb.GET, path, "LISTSTATUS")
        return result.data if result.is_ok() else None

    def get_home_directory(self) -> str:
        """获取当前用户的主目录，失败时为空字符串"""
        result = self._request(ResponseMode.JSON, HttpVerb.GET, "", "GETHOMEDIRECTORY")
        if not result.is_ok():
            return ""
        home = result.data.get("Path")
        return "" if home is None else home

    def chown(self, path: str, owner: str, group: Optional[str] = None) -> bool:
        """
        设置属主和属组

        Args:
            path: 文件或目录路径
            owner: 属主
            group: 属组，为空时不修改
        """
        options: Dict[str, Any] = {"owner": owner}
        if group:
            options["group"] = group
        result = self._request(ResponseMode.STATUS_ONLY, HttpVerb.PUT, path, "SETOWNER", options)
        return result.has_status(200)

    def chmod(self, path: str, permission: Any) -> bool:
        """设置权限"""
        result = self._request(ResponseMode.STATUS_ONLY, HttpVerb.PUT, path, "SETPERMISSION",
                               {"permission": permission})
        return result.has_status(200)

    def get_file_stats(self, path: str) -> Optional[FileStatus]:
        """
        获取类型化的文件状态信息

        Args:
            path: 文件路径

        Returns:
            文件状态信息，失败时为None
        """
        data = self.stat(path)
        if not data or not isinstance(data.get("FileStatus"), dict):
            return None
        return FileStatus.from_dict(data["FileStatus"], parent=path)

    def list_file_stats(self, path: str) -> List[FileStatus]:
        """
        列出目录下的文件状态信息

        Args:
            path: 目录路径

        Returns:
            文件状态信息列表，失败时为空列表
        """
        data = self.list_status(path)
        if not data:
            return []

        items = (data.get("FileStatuses") or {}).get("FileStatus") or []
        stat_list = [FileStatus.from_dict(item, parent=path) for item in items if isinstance(item, dict)]
        logger.debug(f"Listed {len(stat_list)} items in {path}")
        return stat_list

    def exists(self, path: str) -> bool:
        """检查文件或目录是否存在"""
        return self.get_file_stats(path) is not None

    def is_file(self, path: str) -> bool:
        """检查是否为文件"""
        stat_info = self.get_file_stats(path)
        return stat_info is not None and stat_info.is_file()

    def is_directory(self, path: str) -> bool:
        """检查是否为目录"""
        stat_info = self.get_file_stats(path)
        return stat_info is not None and stat_info.is_directory()

    def close(self):
        """关闭客户端；每次请求使用独立Session，这里没有需要释放的连接"""
        logger.info("Closed WebHDFS client")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
