"""
基础使用示例
演示WebHDFS Python客户端的基本用法
"""

import logging
from webhdfs_client import WebHDFS

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def main():
    """主函数"""
    print("=== WebHDFS Python客户端基础使用示例 ===\n")

    with WebHDFS(host="localhost", port=50070, user="hadoop") as fs:
        # 1. 主目录
        home = fs.get_home_directory()
        print(f"1. 主目录: {home or '获取失败'}")

        # 2. 创建目录
        print("\n2. 创建目录...")
        if not fs.mkdir("/tmp/demo_dir"):
            print("   ✗ 目录创建失败")
            return
        print("   ✓ 目录创建成功: /tmp/demo_dir")

        # 3. 创建并写入文件
        print("\n3. 创建并写入文件...")
        if not fs.create("/tmp/demo_dir/test.txt", "Hello, WebHDFS! 这是一个测试文件。".encode("utf-8"), overwrite=True):
            print("   ✗ 文件创建失败")
            return
        print("   ✓ 文件创建并写入成功: /tmp/demo_dir/test.txt")

        # 4. 追加
        print("\n4. 追加内容...")
        if fs.append("/tmp/demo_dir/test.txt", b"\nappended line"):
            print("   ✓ 追加成功")
        else:
            print("   ✗ 追加失败")

        # 5. 读取文件
        print("\n5. 读取文件...")
        content = fs.open("/tmp/demo_dir/test.txt")
        if content is not None:
            print(f"   ✓ 文件读取成功，内容: {content.decode('utf-8')}")
        else:
            print("   ✗ 文件读取失败")

        # 6. 文件信息和目录列表
        print("\n6. 获取文件信息...")
        stats = fs.get_file_stats("/tmp/demo_dir/test.txt")
        if stats:
            print(f"   ✓ {stats}")
        for item in fs.list_file_stats("/tmp/demo_dir"):
            print(f"     - {item.get_path()} ({item.get_type()}, {item.get_length()} bytes)")

        # 7. 权限
        print("\n7. 修改权限...")
        print("   ✓ chmod成功" if fs.chmod("/tmp/demo_dir/test.txt", "644") else "   ✗ chmod失败")

        # 8. 重命名和删除
        print("\n8. 重命名和删除...")
        if fs.rename("/tmp/demo_dir/test.txt", "/tmp/demo_dir/renamed.txt"):
            print("   ✓ 重命名成功")
        if fs.delete("/tmp/demo_dir", recursive=True):
            print("   ✓ 删除成功")
        print("   ✓ 已确认删除" if not fs.exists("/tmp/demo_dir") else "   ✗ 目录仍然存在")

    print("\n=== 示例执行完成 ===")


if __name__ == "__main__":
    main()
