"""
基础操作测试
"""

import pytest
from unittest.mock import Mock
from webhdfs_client import WebHDFS
from webhdfs_client.domain import DispatchOutcome, DispatchResult, FileType, HttpVerb, ResponseMode


def ok(mode: ResponseMode, status_code: int = 200, data=None, body=None) -> DispatchResult:
    return DispatchResult(mode, DispatchOutcome.OK, status_code=status_code, data=data, body=body)


def failed(mode: ResponseMode, outcome=DispatchOutcome.UNEXPECTED_STATUS, status_code=404) -> DispatchResult:
    return DispatchResult.failure(mode, outcome, "failed", status_code=status_code)


class TestBasicOperations:
    """基础操作测试类"""

    @pytest.fixture
    def http_client(self):
        return Mock()

    @pytest.fixture
    def fs(self, http_client):
        """创建使用模拟HTTP客户端的文件系统客户端"""
        return WebHDFS(host="namenode", port=50070, user="hadoop", http_client=http_client)

    def dispatched(self, http_client):
        """返回最后一次dispatch的(url, verb, mode, body)"""
        return http_client.dispatch.call_args.args

    def test_create_success(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.REDIRECTED_WRITE, 201)

        assert fs.create("/tmp/a.txt", b"hello", overwrite=True) is True
        url, verb, mode, body = self.dispatched(http_client)
        assert url == "http://namenode:50070/webhdfs/v1/tmp/a.txt?op=CREATE&overwrite=true&user.name=hadoop"
        assert verb is HttpVerb.PUT
        assert mode is ResponseMode.REDIRECTED_WRITE
        assert body == b"hello"

    @pytest.mark.parametrize("result", [
        ok(ResponseMode.REDIRECTED_WRITE, 200),
        ok(ResponseMode.REDIRECTED_WRITE, 403),
        failed(ResponseMode.REDIRECTED_WRITE, status_code=400),
        failed(ResponseMode.REDIRECTED_WRITE, DispatchOutcome.TRANSPORT_ERROR, None),
    ])
    def test_create_failure(self, fs, http_client, result):
        http_client.dispatch.return_value = result
        assert fs.create("/tmp/a.txt", b"hello") is False

    def test_append_defaults_buffersize_to_payload_length(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.REDIRECTED_WRITE, 200)

        assert fs.append("/tmp/a.txt", b"12345") is True
        url, verb, mode, body = self.dispatched(http_client)
        assert url == "http://namenode:50070/webhdfs/v1/tmp/a.txt?op=APPEND&buffersize=5&user.name=hadoop"
        assert verb is HttpVerb.POST
        assert body == b"12345"

    def test_append_explicit_buffersize(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.REDIRECTED_WRITE, 200)

        fs.append("/tmp/a.txt", b"12345", buffersize=4096)
        assert "buffersize=4096" in self.dispatched(http_client)[0]

    def test_append_requires_200(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.REDIRECTED_WRITE, 201)
        assert fs.append("/tmp/a.txt", b"x") is False

    def test_open_success(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.RAW, body=b"content")

        assert fs.open("/tmp/a.txt", offset=2, length=3) == b"content"
        url, verb, mode, body = self.dispatched(http_client)
        assert url == "http://namenode:50070/webhdfs/v1/tmp/a.txt?op=OPEN&offset=2&length=3&user.name=hadoop"
        assert verb is HttpVerb.GET
        assert mode is ResponseMode.RAW
        assert body is None

    def test_open_failure(self, fs, http_client):
        http_client.dispatch.return_value = failed(ResponseMode.RAW)
        assert fs.open("/tmp/missing.txt") is None

    @pytest.mark.parametrize("data,expected", [
        ({"boolean": True}, True),
        ({"boolean": False}, False),
        ({}, False),
        ({"boolean": "true"}, False),
        ({"boolean": 1}, False),
    ])
    def test_mkdir_boolean(self, fs, http_client, data, expected):
        http_client.dispatch.return_value = ok(ResponseMode.JSON, data=data)

        assert fs.mkdir("/tmp/dir") is expected
        url, verb, mode, _ = self.dispatched(http_client)
        assert url == "http://namenode:50070/webhdfs/v1/tmp/dir?op=MKDIRS&permission=755&user.name=hadoop"
        assert verb is HttpVerb.PUT
        assert mode is ResponseMode.JSON

    def test_mkdir_failure(self, fs, http_client):
        http_client.dispatch.return_value = failed(ResponseMode.JSON, status_code=403)
        assert fs.mkdir("/tmp/dir") is False

    def test_mkdir_malformed_body(self, fs, http_client):
        http_client.dispatch.return_value = failed(ResponseMode.JSON, DispatchOutcome.MALFORMED_BODY, 200)
        assert fs.mkdir("/tmp/dir") is False

    def test_rename(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.JSON, data={"boolean": True})

        assert fs.rename("/tmp/a", "/tmp/b") is True
        url, verb, _, _ = self.dispatched(http_client)
        assert url == "http://namenode:50070/webhdfs/v1/tmp/a?op=RENAME&destination=%2Ftmp%2Fb&user.name=hadoop"
        assert verb is HttpVerb.PUT

    @pytest.mark.parametrize("recursive,flag", [(False, "false"), (True, "true")])
    def test_delete(self, fs, http_client, recursive, flag):
        http_client.dispatch.return_value = ok(ResponseMode.JSON, data={"boolean": True})

        assert fs.delete("/tmp/a", recursive=recursive) is True
        url, verb, _, _ = self.dispatched(http_client)
        assert url == f"http://namenode:50070/webhdfs/v1/tmp/a?op=DELETE&recursive={flag}&user.name=hadoop"
        assert verb is HttpVerb.DELETE

    def test_delete_failure(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.JSON, data={"boolean": False})
        assert fs.delete("/tmp/missing") is False

    def test_stat_returns_mapping_unmodified(self, fs, http_client):
        data = {"FileStatus": {"type": "FILE", "length": 3, "extra": [1, 2]}}
        http_client.dispatch.return_value = ok(ResponseMode.JSON, data=data)

        assert fs.stat("/tmp/a.txt") is data
        url, verb, _, _ = self.dispatched(http_client)
        assert url == "http://namenode:50070/webhdfs/v1/tmp/a.txt?op=GETFILESTATUS&user.name=hadoop"
        assert verb is HttpVerb.GET

    def test_stat_twice_is_identical(self, fs, http_client):
        http_client.dispatch.side_effect = [
            ok(ResponseMode.JSON, data={"FileStatus": {"type": "FILE", "length": 3}}),
            ok(ResponseMode.JSON, data={"FileStatus": {"type": "FILE", "length": 3}}),
        ]
        assert fs.stat("/tmp/a.txt") == fs.stat("/tmp/a.txt")

    def test_stat_failure(self, fs, http_client):
        http_client.dispatch.return_value = failed(ResponseMode.JSON)
        assert fs.stat("/tmp/missing") is None

    def test_list_status(self, fs, http_client):
        data = {"FileStatuses": {"FileStatus": []}}
        http_client.dispatch.return_value = ok(ResponseMode.JSON, data=data)

        assert fs.list_status("/tmp") is data
        assert self.dispatched(http_client)[0] == \
            "http://namenode:50070/webhdfs/v1/tmp?op=LISTSTATUS&user.name=hadoop"

    def test_get_home_directory(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.JSON, data={"Path": "/user/hadoop"})

        assert fs.get_home_directory() == "/user/hadoop"
        assert self.dispatched(http_client)[0] == \
            "http://namenode:50070/webhdfs/v1?op=GETHOMEDIRECTORY&user.name=hadoop"

    @pytest.mark.parametrize("result", [
        ok(ResponseMode.JSON, data={}),
        ok(ResponseMode.JSON, data={"Path": None}),
        failed(ResponseMode.JSON),
    ])
    def test_get_home_directory_missing(self, fs, http_client, result):
        http_client.dispatch.return_value = result
        assert fs.get_home_directory() == ""

    def test_chown_with_group(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.STATUS_ONLY, 200)

        assert fs.chown("/tmp/a", "alice", "staff") is True
        url, verb, mode, _ = self.dispatched(http_client)
        assert url == "http://namenode:50070/webhdfs/v1/tmp/a?op=SETOWNER&owner=alice&group=staff&user.name=hadoop"
        assert verb is HttpVerb.PUT
        assert mode is ResponseMode.STATUS_ONLY

    def test_chown_without_group(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.STATUS_ONLY, 200)

        fs.chown("/tmp/a", "alice")
        assert "group" not in self.dispatched(http_client)[0]

    def test_chown_failure(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.STATUS_ONLY, 403)
        assert fs.chown("/tmp/a", "alice") is False

    def test_chmod(self, fs, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.STATUS_ONLY, 200)

        assert fs.chmod("/tmp/a", "640") is True
        assert self.dispatched(http_client)[0] == \
            "http://namenode:50070/webhdfs/v1/tmp/a?op=SETPERMISSION&permission=640&user.name=hadoop"

    def test_chmod_transport_error(self, fs, http_client):
        http_client.dispatch.return_value = failed(ResponseMode.STATUS_ONLY, DispatchOutcome.TRANSPORT_ERROR, None)
        assert fs.chmod("/tmp/a", "640") is False

    def test_no_user_means_no_user_name(self, http_client):
        http_client.dispatch.return_value = ok(ResponseMode.STATUS_ONLY, 200)
        fs = WebHDFS(host="namenode", port=14000, http_client=http_client)

        fs.chmod("/tmp/a", "640")
        assert self.dispatched(http_client)[0] == \
            "http://namenode:14000/webhdfs/v1/tmp/a?op=SETPERMISSION&permission=640"


class TestTypedHelpers:
    """类型化辅助方法测试"""

    @pytest.fixture
    def fs(self):
        return WebHDFS(host="namenode", port=50070, http_client=Mock())

    def test_get_file_stats(self, fs):
        fs.http_client.dispatch.return_value = ok(ResponseMode.JSON, data={
            "FileStatus": {"pathSuffix": "", "type": "FILE", "length": 1024, "owner": "hadoop",
                           "group": "supergroup", "permission": "644", "replication": 3}
        })

        stats = fs.get_file_stats("/test_file.txt")
        assert stats is not None
        assert stats.get_path() == "/test_file.txt"
        assert stats.get_length() == 1024
        assert stats.get_type() == FileType.FILE
        assert stats.replication == 3

    def test_get_file_stats_not_found(self, fs):
        fs.http_client.dispatch.return_value = failed(ResponseMode.JSON)
        assert fs.get_file_stats("/nonexistent_file.txt") is None

    def test_get_file_stats_without_envelope(self, fs):
        fs.http_client.dispatch.return_value = ok(ResponseMode.JSON, data={"unexpected": 1})
        assert fs.get_file_stats("/test_file.txt") is None

    def test_list_file_stats(self, fs):
        fs.http_client.dispatch.return_value = ok(ResponseMode.JSON, data={
            "FileStatuses": {"FileStatus": [
                {"pathSuffix": "file1.txt", "type": "FILE", "length": 512},
                {"pathSuffix": "subdir", "type": "DIRECTORY", "length": 0},
            ]}
        })

        items = fs.list_file_stats("/test_dir")
        assert len(items) == 2
        assert items[0].get_path() == "/test_dir/file1.txt"
        assert items[0].get_length() == 512
        assert items[0].get_type() == FileType.FILE
        assert items[1].get_path() == "/test_dir/subdir"
        assert items[1].get_type() == FileType.DIRECTORY

    def test_list_file_stats_failure(self, fs):
        fs.http_client.dispatch.return_value = failed(ResponseMode.JSON)
        assert fs.list_file_stats("/test_dir") == []

    def test_exists(self, fs):
        fs.http_client.dispatch.return_value = ok(ResponseMode.JSON, data={"FileStatus": {"type": "FILE"}})
        assert fs.exists("/test_file.txt") is True
        fs.http_client.dispatch.return_value = failed(ResponseMode.JSON)
        assert fs.exists("/test_file.txt") is False

    def test_is_file_and_is_directory(self, fs):
        fs.http_client.dispatch.return_value = ok(ResponseMode.JSON, data={"FileStatus": {"type": "DIRECTORY"}})
        assert fs.is_directory("/test_dir") is True
        assert fs.is_file("/test_dir") is False

    def test_context_manager(self):
        with WebHDFS(host="namenode", port=50070, http_client=Mock()) as fs:
            assert fs.connection_info.get_host() == "namenode"

    def test_timeouts_configure_default_client(self):
        fs = WebHDFS(host="namenode", port=50070, connect_timeout=1.5, read_timeout=20)
        assert fs.http_client.timeout == (1.5, 20)
