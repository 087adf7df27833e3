"""
WebHDFS Python客户端命令行接口
"""

import argparse
import logging
import sys
from . import WebHDFS
from .util.http_client_util import HttpClientUtil


def setup_logging(verbose: bool = False):
    """设置日志"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _report(ok: bool, success: str, failure: str) -> bool:
    print(f"  ✓ {success}" if ok else f"  ✗ {failure}")
    return ok


def ls_command(fs: WebHDFS, path: str) -> bool:
    """列出目录内容"""
    print(f"列出目录: {path}")
    if fs.list_status(path) is None:
        print("  ✗ 列出失败")
        return False

    items = fs.list_file_stats(path)
    if not items:
        print("  目录为空")
        return True

    print(f"  找到 {len(items)} 个项目:")
    for item in items:
        size_str = f"{item.get_length()} bytes" if item.is_file() else "目录"
        print(f"    {item.permission:>4} {item.owner:<10} {item.group:<10} {item.get_path()} ({item.get_type()}, {size_str})")
    return True


def stat_command(fs: WebHDFS, path: str) -> bool:
    """显示文件状态"""
    print(f"文件状态: {path}")
    stats = fs.get_file_stats(path)

    if not stats:
        print("  文件不存在")
        return False

    print(f"  路径: {stats.get_path()}")
    print(f"  大小: {stats.get_length()} bytes")
    print(f"  类型: {stats.get_type()}")
    print(f"  属主: {stats.owner}:{stats.group}")
    print(f"  权限: {stats.permission}")
    print(f"  副本数: {stats.replication}")
    return True


def cat_command(fs: WebHDFS, path: str) -> bool:
    """输出文件内容"""
    content = fs.open(path)
    if content is None:
        print(f"  ✗ 读取失败: {path}", file=sys.stderr)
        return False
    sys.stdout.buffer.write(content)
    sys.stdout.flush()
    return True


def put_command(fs: WebHDFS, local_path: str, path: str, overwrite: bool) -> bool:
    """上传本地文件"""
    print(f"上传: {local_path} -> {path}")
    with open(local_path, 'rb') as f:
        data = f.read()
    return _report(fs.create(path, data, overwrite=overwrite), "上传成功", "上传失败")


def append_command(fs: WebHDFS, local_path: str, path: str) -> bool:
    """追加本地文件内容"""
    print(f"追加: {local_path} -> {path}")
    with open(local_path, 'rb') as f:
        data = f.read()
    return _report(fs.append(path, data), "追加成功", "追加失败")


def mkdir_command(fs: WebHDFS, path: str, permission: str) -> bool:
    """创建目录"""
    print(f"创建目录: {path}")
    return _report(fs.mkdir(path, permission), "创建成功", "创建失败")


def mv_command(fs: WebHDFS, path: str, destination: str) -> bool:
    """重命名"""
    print(f"重命名: {path} -> {destination}")
    return _report(fs.rename(path, destination), "重命名成功", "重命名失败")


def rm_command(fs: WebHDFS, path: str, recursive: bool) -> bool:
    """删除文件或目录"""
    print(f"删除: {path}")
    return _report(fs.delete(path, recursive), "删除成功", "删除失败")


def chown_command(fs: WebHDFS, path: str, owner: str, group: str) -> bool:
    """修改属主"""
    print(f"修改属主: {path} -> {owner}:{group or ''}")
    return _report(fs.chown(path, owner, group), "修改成功", "修改失败")


def chmod_command(fs: WebHDFS, path: str, permission: str) -> bool:
    """修改权限"""
    print(f"修改权限: {path} -> {permission}")
    return _report(fs.chmod(path, permission), "修改成功", "修改失败")


def home_command(fs: WebHDFS) -> bool:
    """显示主目录"""
    home = fs.get_home_directory()
    if not home:
        print("  ✗ 获取主目录失败")
        return False
    print(home)
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="WebHDFS Python客户端命令行工具")
    parser.add_argument("--verbose", "-v", action="store_true", help="详细输出")
    parser.add_argument("--host", default="localhost", help="NameNode主机地址")
    parser.add_argument("--port", "-p", type=int, default=50070, help="NameNode HTTP端口")
    parser.add_argument("--user", "-u", default=None, help="操作用户（user.name）")
    parser.add_argument("--timeout", "-t", type=float, default=HttpClientUtil.DEFAULT_CONNECT_TIMEOUT,
                        help="连接超时时间（秒）")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    ls_parser = subparsers.add_parser("ls", help="列出目录内容")
    ls_parser.add_argument("path", nargs="?", default="/", help="目录路径")

    stat_parser = subparsers.add_parser("stat", help="显示文件状态")
    stat_parser.add_argument("path", help="文件路径")

    cat_parser = subparsers.add_parser("cat", help="输出文件内容")
    cat_parser.add_argument("path", help="文件路径")

    put_parser = subparsers.add_parser("put", help="上传本地文件")
    put_parser.add_argument("local_path", help="本地文件路径")
    put_parser.add_argument("path", help="HDFS文件路径")
    put_parser.add_argument("--overwrite", action="store_true", help="覆盖已存在的文件")

    append_parser = subparsers.add_parser("append", help="追加本地文件内容")
    append_parser.add_argument("local_path", help="本地文件路径")
    append_parser.add_argument("path", help="HDFS文件路径")

    mkdir_parser = subparsers.add_parser("mkdir", help="创建目录")
    mkdir_parser.add_argument("path", help="目录路径")
    mkdir_parser.add_argument("--permission", default="755", help="八进制权限")

    mv_parser = subparsers.add_parser("mv", help="重命名文件或目录")
    mv_parser.add_argument("path", help="源路径")
    mv_parser.add_argument("destination", help="目标路径")

    rm_parser = subparsers.add_parser("rm", help="删除文件或目录")
    rm_parser.add_argument("path", help="文件或目录路径")
    rm_parser.add_argument("--recursive", "-r", action="store_true", help="递归删除")

    chown_parser = subparsers.add_parser("chown", help="修改属主")
    chown_parser.add_argument("owner", help="属主")
    chown_parser.add_argument("path", help="文件或目录路径")
    chown_parser.add_argument("--group", "-g", default=None, help="属组")

    chmod_parser = subparsers.add_parser("chmod", help="修改权限")
    chmod_parser.add_argument("permission", help="八进制权限")
    chmod_parser.add_argument("path", help="文件或目录路径")

    subparsers.add_parser("home", help="显示主目录")

    return parser


def run_command(fs: WebHDFS, args: argparse.Namespace) -> bool:
    """执行子命令"""
    if args.command == "ls":
        return ls_command(fs, args.path)
    elif args.command == "stat":
        return stat_command(fs, args.path)
    elif args.command == "cat":
        return cat_command(fs, args.path)
    elif args.command == "put":
        return put_command(fs, args.local_path, args.path, args.overwrite)
    elif args.command == "append":
        return append_command(fs, args.local_path, args.path)
    elif args.command == "mkdir":
        return mkdir_command(fs, args.path, args.permission)
    elif args.command == "mv":
        return mv_command(fs, args.path, args.destination)
    elif args.command == "rm":
        return rm_command(fs, args.path, args.recursive)
    elif args.command == "chown":
        return chown_command(fs, args.path, args.owner, args.group)
    elif args.command == "chmod":
        return chmod_command(fs, args.path, args.permission)
    elif args.command == "home":
        return home_command(fs)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None):
    """主函数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    # 设置日志
    setup_logging(args.verbose)

    # 创建文件系统客户端
    try:
        fs = WebHDFS(host=args.host, port=args.port, user=args.user, connect_timeout=args.timeout)
    except ValueError as e:
        print(f"参数错误: {e}")
        sys.exit(2)

    try:
        ok = run_command(fs, args)
    except OSError as e:
        print(f"命令执行失败: {e}")
        sys.exit(1)
    finally:
        fs.close()

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
