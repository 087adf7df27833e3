"""
文件类型枚举
"""

from enum import Enum


class FileType(Enum):
    """文件类型枚举，取值与WebHDFS FileStatus中的type字段一致"""
    UNKNOWN = "UNKNOWN"
    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    SYMLINK = "SYMLINK"
    
    @classmethod
    def get(cls, code: str) -> 'FileType':
        """
        根据type字段获取文件类型
        
        Args:
            code: FileStatus中的type字段
            
        Returns:
            对应的文件类型枚举值
        """
        for file_type in cls:
            if file_type.value == code:
                return file_type
        return cls.UNKNOWN
    
    def __str__(self):
        return self.name
    
    def __repr__(self):
        return f"FileType.{self.name}"
