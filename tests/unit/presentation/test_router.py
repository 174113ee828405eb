"""Router Unit Tests"""
import pytest

from src.presentation.api.router import DISPATCH_TABLE, Operation, Router


class TestResolve:
    """resolve のテスト"""

    @pytest.mark.parametrize(
        "method,resource,operation",
        [
            ("GET", "/reminders", Operation.LIST_REMINDERS),
            ("GET", "/reminders/{id}", Operation.GET_REMINDER),
            ("POST", "/reminders", Operation.CREATE_REMINDER),
            ("PUT", "/reminders/status/{id}", Operation.UPDATE_REMINDER_STATUS),
            ("PUT", "/reminders/flag/{id}", Operation.UPDATE_REMINDER_FLAG),
            ("DELETE", "/reminders/{id}", Operation.DELETE_REMINDER),
        ],
    )
    def test_dispatch_table_entries(self, method, resource, operation):
        """正常: テーブルの各エントリが対応する操作に解決される"""
        assert Router().resolve(method, resource) is operation

    def test_every_other_combination_is_not_supported(self):
        """異常: テーブル外の組み合わせはすべて NOT_SUPPORTED"""
        router = Router()
        methods = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]
        resources = {r for _, r in DISPATCH_TABLE} | {"/", "/reminder", "/reminders/"}

        for method in methods:
            for resource in resources:
                if (method, resource) in DISPATCH_TABLE:
                    continue
                assert router.resolve(method, resource) is Operation.NOT_SUPPORTED

    def test_path_match_with_wrong_method(self):
        """異常: パス一致でもメソッド不一致は NOT_SUPPORTED"""
        assert Router().resolve("POST", "/reminders/{id}") is Operation.NOT_SUPPORTED
        assert Router().resolve("DELETE", "/reminders") is Operation.NOT_SUPPORTED

    def test_method_is_case_insensitive(self):
        assert Router().resolve("get", "/reminders") is Operation.LIST_REMINDERS

    def test_prefix_is_stripped(self):
        """正常: ルートプレフィックスを除去して解決する"""
        router = Router(prefix="/api/v1")

        assert router.resolve("GET", "/api/v1/reminders") is Operation.LIST_REMINDERS
        assert router.resolve("GET", "/reminders") is Operation.NOT_SUPPORTED


class TestMatchPath:
    """match_path のテスト"""

    @pytest.mark.parametrize(
        "path,template,params",
        [
            ("/reminders", "/reminders", {}),
            ("/reminders/", "/reminders", {}),
            ("/reminders/abc", "/reminders/{id}", {"id": "abc"}),
            ("/reminders/status/abc", "/reminders/status/{id}", {"id": "abc"}),
            ("/reminders/flag/abc", "/reminders/flag/{id}", {"id": "abc"}),
        ],
    )
    def test_concrete_paths(self, path, template, params):
        """正常: 具体的なパスをテンプレートに解決する"""
        assert Router().match_path(path) == (template, params)

    def test_unknown_path(self):
        assert Router().match_path("/tasks/abc") is None
        assert Router().match_path("/reminders/a/b/c") is None

    def test_prefixed_path(self):
        router = Router(prefix="/api/v1/")

        assert router.match_path("/api/v1/reminders/x") == (
            "/api/v1/reminders/{id}",
            {"id": "x"},
        )
        assert router.match_path("/reminders/x") is None


class TestLocate:
    """locate のテスト"""

    def test_uses_resource_template_when_present(self):
        result = Router().locate("GET", "/reminders/{id}", "/reminders/abc")

        assert result == ("/reminders/{id}", {}, Operation.GET_REMINDER)

    def test_falls_back_to_concrete_path(self):
        """正常: resource が無ければ path から解決する"""
        result = Router().locate("PUT", path="/reminders/status/abc")

        assert result == (
            "/reminders/status/{id}",
            {"id": "abc"},
            Operation.UPDATE_REMINDER_STATUS,
        )

    def test_unknown_path_is_not_supported(self):
        assert Router().locate("GET", path="/tasks") == (
            "/tasks",
            {},
            Operation.NOT_SUPPORTED,
        )
