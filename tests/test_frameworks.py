"""Tests for routescribe.frameworks — framework identifiers and rules."""

import pytest

from routescribe.errors import ConfigurationError, UnsupportedFramework
from routescribe.frameworks import DecoratorRule, Framework, VerbCallRule


class TestFrameworkParse:
    @pytest.mark.parametrize(
        "name", ["elysia", "express", "nestjs", "fastify", "adonis", "koa", "hono"]
    )
    def test_supported(self, name: str) -> None:
        assert Framework.parse(name).value == name

    def test_case_and_whitespace_normalized(self) -> None:
        assert Framework.parse(" Express ") is Framework.EXPRESS

    def test_member_passthrough(self) -> None:
        assert Framework.parse(Framework.KOA) is Framework.KOA

    def test_unsupported_fails_fast(self) -> None:
        with pytest.raises(UnsupportedFramework) as exc_info:
            Framework.parse("django")
        assert exc_info.value.name == "django"
        assert "express" in str(exc_info.value)

    def test_unsupported_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            Framework.parse("flask")

    def test_names_in_declaration_order(self) -> None:
        assert Framework.names() == (
            "elysia", "express", "nestjs", "fastify", "adonis", "koa", "hono",
        )


class TestRules:
    def test_nestjs_uses_decorators(self) -> None:
        assert isinstance(Framework.NESTJS.rule, DecoratorRule)

    @pytest.mark.parametrize(
        "framework",
        [f for f in Framework if f is not Framework.NESTJS],
    )
    def test_others_use_verb_calls(self, framework: Framework) -> None:
        assert isinstance(framework.rule, VerbCallRule)

    def test_express_receivers(self) -> None:
        rule = Framework.EXPRESS.rule
        assert isinstance(rule, VerbCallRule)
        assert rule.receivers == frozenset({"app", "router"})

    def test_elysia_excludes_app_and_router(self) -> None:
        rule = Framework.ELYSIA.rule
        assert isinstance(rule, VerbCallRule)
        assert rule.receivers == frozenset()
        assert rule.excluded_receivers == frozenset({"app", "router"})

    def test_rule_is_frozen(self) -> None:
        rule = Framework.KOA.rule
        with pytest.raises(AttributeError):
            rule.receivers = frozenset({"app"})  # type: ignore[misc]


class TestVerbCallRuleFind:
    def test_yields_raw_verb_token(self) -> None:
        rule = VerbCallRule(receivers=frozenset({"app"}))
        assert list(rule.find("app.GET('/x')")) == [("GET", "/x")]

    def test_custom_receivers(self) -> None:
        rule = VerbCallRule(receivers=frozenset({"api"}))
        assert list(rule.find("api.post('/a'); app.post('/b')")) == [("post", "/a")]


class TestDecoratorRuleFind:
    def test_prefix_absent(self) -> None:
        assert DecoratorRule().find_prefix("@Get('x')") == ""

    def test_prefix_bare(self) -> None:
        assert DecoratorRule().find_prefix("@Controller()") == ""

    def test_prefix_first_wins(self) -> None:
        source = "@Controller('a')\nclass A {}\n@Controller('b')\nclass B {}"
        assert DecoratorRule().find_prefix(source) == "a"

    def test_fragments(self) -> None:
        source = "@Get()\n@Post('items')\n@Delete(\":id\")"
        assert list(DecoratorRule().find(source)) == [
            ("Get", ""),
            ("Post", "items"),
            ("Delete", ":id"),
        ]
