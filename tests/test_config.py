"""Tests for routescribe.config — GenerateConfig frozen dataclass."""

from pathlib import Path

import pytest

from routescribe.config import GenerateConfig, OutputFormat
from routescribe.errors import ConfigurationError, UnsupportedFramework
from routescribe.frameworks import Framework


class TestGenerateConfig:
    def test_defaults(self) -> None:
        cfg = GenerateConfig()

        assert cfg.framework is Framework.EXPRESS
        assert cfg.output_format is OutputFormat.TS
        assert cfg.root == "."
        assert cfg.extensions == (".js", ".ts")
        assert cfg.exclude_dirs == ("node_modules", "dist", "tests")
        assert cfg.max_workers == 8
        assert cfg.log_level == "warning"

    def test_strings_coerced(self) -> None:
        cfg = GenerateConfig(framework="NestJS", output_format="JS")

        assert cfg.framework is Framework.NESTJS
        assert cfg.output_format is OutputFormat.JS

    def test_unsupported_framework(self) -> None:
        with pytest.raises(UnsupportedFramework):
            GenerateConfig(framework="rails")  # type: ignore[arg-type]

    def test_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            GenerateConfig(output_format="py")  # type: ignore[arg-type]
        assert "'py'" in str(exc_info.value)

    def test_invalid_workers(self) -> None:
        with pytest.raises(ConfigurationError):
            GenerateConfig(max_workers=0)

    def test_frozen(self) -> None:
        cfg = GenerateConfig()

        with pytest.raises(AttributeError):
            cfg.root = "src"  # type: ignore[misc]

    def test_output_path(self, tmp_path: Path) -> None:
        ts = GenerateConfig(root=tmp_path)
        js = GenerateConfig(root=tmp_path, output_format=OutputFormat.JS)

        assert ts.output_name == "api.ts"
        assert ts.output_path == tmp_path / "api.ts"
        assert js.output_path == tmp_path / "api.js"


class TestOutputFormat:
    def test_parse_case_insensitive(self) -> None:
        assert OutputFormat.parse("TS") is OutputFormat.TS
        assert OutputFormat.parse(" js ") is OutputFormat.JS

    def test_parse_passthrough(self) -> None:
        assert OutputFormat.parse(OutputFormat.JS) is OutputFormat.JS

    def test_parse_unknown(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            OutputFormat.parse("xml")
        assert "Unknown output format 'xml'" in str(exc_info.value)
