"""
文件状态信息类
"""

import posixpath
from typing import Any, Dict
from .file_type import FileType


class FileStatus:
    """WebHDFS FileStatus对象的类型化视图"""
    
    def __init__(self, path: str = "", length: int = 0, file_type: FileType = FileType.UNKNOWN,
                 owner: str = "", group: str = "", permission: str = "",
                 replication: int = 0, block_size: int = 0,
                 access_time: int = 0, modification_time: int = 0):
        """
        初始化文件状态信息
        
        Args:
            path: 文件完整路径
            length: 文件大小（字节）
            file_type: 文件类型
            owner: 属主
            group: 属组
            permission: 八进制权限字符串，如"755"
            replication: 副本数
            block_size: 块大小
            access_time: 访问时间（毫秒）
            modification_time: 修改时间（毫秒）
        """
        self.path: str = path
        self.length: int = length
        self.type: FileType = file_type
        self.owner: str = owner
        self.group: str = group
        self.permission: str = permission
        self.replication: int = replication
        self.block_size: int = block_size
        self.access_time: int = access_time
        self.modification_time: int = modification_time
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any], parent: str = "") -> 'FileStatus':
        """
        从FileStatus JSON对象构造
        
        Args:
            data: FileStatus对象
            parent: 父路径；GETFILESTATUS返回的pathSuffix为空，此时即为自身路径
        """
        suffix = data.get("pathSuffix", "")
        path = posixpath.join(parent, suffix) if suffix else parent
        return cls(
            path=path,
            length=data.get("length", 0),
            file_type=FileType.get(data.get("type", "")),
            owner=data.get("owner", ""),
            group=data.get("group", ""),
            permission=data.get("permission", ""),
            replication=data.get("replication", 0),
            block_size=data.get("blockSize", 0),
            access_time=data.get("accessTime", 0),
            modification_time=data.get("modificationTime", 0),
        )
    
    def get_path(self) -> str:
        """获取文件路径"""
        return self.path
    
    def get_length(self) -> int:
        """获取文件大小"""
        return self.length
    
    def get_type(self) -> FileType:
        """获取文件类型"""
        return self.type
    
    def is_file(self) -> bool:
        """判断是否为文件"""
        return self.type == FileType.FILE
    
    def is_directory(self) -> bool:
        """判断是否为目录"""
        return self.type == FileType.DIRECTORY
    
    def __str__(self):
        return (f"FileStatus{{path='{self.path}', length={self.length}, type={self.type}, "
                f"owner='{self.owner}', group='{self.group}', permission='{self.permission}'}}")
    
    def __repr__(self):
        return self.__str__()
