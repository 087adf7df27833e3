"""
核心模块 - 文件系统基础类和WebHDFS实现
"""

from .file_system import FileSystem
from .web_hdfs import WebHDFS

__all__ = [
    'FileSystem',
    'WebHDFS'
]
