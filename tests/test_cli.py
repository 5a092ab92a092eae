"""Tests for routescribe.cli — argument parsing, generate, and routes."""

from pathlib import Path

import pytest

from routescribe.cli import main

EXPRESS_APP = """\
app.get('/users', list);
app.get('/users/:id', show);
app.put('/users/:id/avatar', setAvatar);
"""


@pytest.fixture
def backend(tmp_path: Path) -> Path:
    (tmp_path / "server.js").write_text(EXPRESS_APP, encoding="utf-8")
    return tmp_path


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_generate_help_lists_frameworks(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        for flag in ("--ts", "--js", "--elysia", "--nestjs", "--hono"):
            assert flag in out

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "routescribe" in capsys.readouterr().out


class TestGenerateFlags:
    def test_requires_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--express"])
        assert exc_info.value.code == 1
        assert "Need to specify --ts or --js" in capsys.readouterr().err

    def test_requires_framework(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--ts"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert (
            "Need to specify one of: --elysia, --express, --nestjs, --fastify, "
            "--adonis, --koa, --hono"
        ) in err

    def test_rejects_multiple_frameworks(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--js", "--koa", "--express"])
        assert exc_info.value.code == 1
        assert "Cannot specify multiple frameworks: express, koa" in capsys.readouterr().err

    def test_unknown_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--ts", "--django"])
        assert exc_info.value.code == 2


class TestGenerate:
    def test_writes_ts(self, backend: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", "--ts", "--express", "--root", str(backend)])

        assert (backend / "api.ts").is_file()
        assert "api.ts generated with 3 routes for express!" in capsys.readouterr().out
        content = (backend / "api.ts").read_text(encoding="utf-8")
        assert "updateAvatar: (userId: any, data: any, config?: AxiosRequestConfig)" in content

    def test_ts_wins_over_js(self, backend: Path) -> None:
        main(["generate", "--ts", "--js", "--express", "--root", str(backend)])
        assert (backend / "api.ts").is_file()
        assert not (backend / "api.js").exists()

    def test_cwd_is_default_root(
        self, backend: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(backend)
        main(["generate", "--js", "--express"])
        assert (backend / "api.js").is_file()

    def test_no_routes_warns(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", "--js", "--nestjs", "--root", str(tmp_path)])
        captured = capsys.readouterr()
        assert "No routes found!" in captured.err
        assert "api.js generated with 0 routes for nestjs!" in captured.out

    def test_missing_root(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--ts", "--express", "--root", str(tmp_path / "missing")])
        assert exc_info.value.code == 1
        assert "Source root not found" in capsys.readouterr().err


class TestRoutes:
    def test_prints_table(self, backend: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "--express", "--root", str(backend)])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].split() == ["METHOD", "PATH", "CLIENT"]
        assert lines[2].split() == ["GET", "/users", "users.getAll"]
        assert lines[3].split() == ["GET", "/users/:id", "users.getByUserId"]
        assert lines[4].split() == ["PUT", "/users/:id/avatar", "users.updateAvatar"]

    def test_does_not_write(self, backend: Path) -> None:
        main(["routes", "--express", "--root", str(backend)])
        assert not (backend / "api.ts").exists()

    def test_no_routes(self, backend: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "--koa", "--root", str(backend)])
        assert "No routes found." in capsys.readouterr().out

    def test_requires_framework(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 1
