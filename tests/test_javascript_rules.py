"""Tests for JavaScript/TypeScript rules."""

import pytest
from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily
from siskel.rules.javascript import (
  DangerousDomSinkRule,
  DebugLoggingRule,
  NestedLoopRule,
  NullAccessRule,
  PromiseChainRule,
  SqlConcatenationRule,
  has_nested_loop,
)


class TestNullAccessRule:
  @pytest.fixture
  def rule(self) -> NullAccessRule:
    return NullAccessRule()

  def test_properties(self, rule: NullAccessRule) -> None:
    assert rule.id == "JS001"
    assert rule.kind == IssueKind.BUG
    assert rule.family == LanguageFamily.JAVASCRIPT

  def test_detects_unguarded_access(self, rule: NullAccessRule) -> None:
    matches = rule.check("app.js", "const name = user.name;")

    assert len(matches) == 1
    assert matches[0].severity == Severity.WARNING
    assert "user?.name" in matches[0].suggestion

  @pytest.mark.parametrize("line", [
    "const name = user?.name;",
    "const name = user && user.name;",
    "const name = user.name || 'anon';",
    "const name = user.name ?? 'anon';",
    "if (user.active) {",
  ])
  def test_ignores_guarded_access(self, rule: NullAccessRule, line: str) -> None:
    assert rule.check("app.js", line) == []

  def test_ignores_comments(self, rule: NullAccessRule) -> None:
    content = "// const name = user.name;\n * user.name;"
    assert rule.check("app.js", content) == []


class TestSqlConcatenationRule:
  @pytest.fixture
  def rule(self) -> SqlConcatenationRule:
    return SqlConcatenationRule()

  def test_detects_concatenated_query(self, rule: SqlConcatenationRule) -> None:
    matches = rule.check("db.js", 'const query = "SELECT * FROM t WHERE id=" + userId;')

    assert len(matches) == 1
    assert matches[0].line == 1
    assert matches[0].severity == Severity.CRITICAL
    assert rule.kind == IssueKind.SECURITY

  def test_ignores_parameterized_query(self, rule: SqlConcatenationRule) -> None:
    assert rule.check("db.js", 'const query = "SELECT * FROM t WHERE id=?";') == []

  def test_detects_identifier_concatenation(self, rule: SqlConcatenationRule) -> None:
    matches = rule.check("db.js", "sqlQuery = base + filter;")
    assert len(matches) == 1

  def test_template_literal(self, rule: SqlConcatenationRule) -> None:
    matches = rule.check("db.js", "query = `SELECT * FROM t WHERE name=` + name;")
    assert len(matches) == 1


class TestDangerousDomSinkRule:
  @pytest.fixture
  def rule(self) -> DangerousDomSinkRule:
    return DangerousDomSinkRule()

  @pytest.mark.parametrize("line", [
    "el.innerHTML = userInput;",
    "document.write(data);",
    "eval(code);",
  ])
  def test_detects_sinks(self, rule: DangerousDomSinkRule, line: str) -> None:
    matches = rule.check("view.js", line)

    assert len(matches) == 1
    assert matches[0].severity == Severity.WARNING
    assert "XSS" in matches[0].message

  def test_ignores_comparison(self, rule: DangerousDomSinkRule) -> None:
    assert rule.check("view.js", "if (el.innerHTML == '') {") == []

  def test_ignores_text_content(self, rule: DangerousDomSinkRule) -> None:
    assert rule.check("view.js", "el.textContent = userInput;") == []


class TestDebugLoggingRule:
  @pytest.fixture
  def rule(self) -> DebugLoggingRule:
    return DebugLoggingRule()

  def test_detects_console_log(self, rule: DebugLoggingRule) -> None:
    content = 'const x = 1;\nconsole.log("x", x);\nconsole.warn("careful");'
    matches = rule.check("src/app.js", content)

    assert [m.line for m in matches] == [2, 3]
    assert all(m.severity == Severity.INFO for m in matches)

  def test_ignores_console_error(self, rule: DebugLoggingRule) -> None:
    assert rule.check("src/app.js", "console.error(err);") == []

  @pytest.mark.parametrize("path", ["src/app.test.js", "tests/app.js", "src/TestUtils.ts"])
  def test_skips_test_files(self, rule: DebugLoggingRule, path: str) -> None:
    assert rule.check(path, 'console.log("debug");') == []

  def test_skips_commented_out_calls(self, rule: DebugLoggingRule) -> None:
    assert rule.check("src/app.js", '// console.log("debug");') == []


class TestNestedLoopRule:
  @pytest.fixture
  def rule(self) -> NestedLoopRule:
    return NestedLoopRule()

  def test_flags_outer_loop(self, rule: NestedLoopRule) -> None:
    matches = rule.check("sort.js", "for (a) {\n for (b) {\n}\n}")

    assert len(matches) == 1
    assert matches[0].line == 1
    assert matches[0].severity == Severity.WARNING
    assert rule.kind == IssueKind.PERFORMANCE

  def test_single_loop_not_flagged(self, rule: NestedLoopRule) -> None:
    assert rule.check("sort.js", "for (let i = 0; i < n; i++) {\n  total += i;\n}") == []

  def test_sequential_loops_not_flagged(self, rule: NestedLoopRule) -> None:
    content = "for (a) {\n  x();\n}\nfor (b) {\n  y();\n}"
    assert rule.check("sort.js", content) == []

  def test_inner_loop_beyond_lookahead(self) -> None:
    lines = ["for (a) {"] + ["  x();"] * 25 + ["  for (b) {", "  }", "}"]
    assert has_nested_loop(lines, 0) is False


class TestPromiseChainRule:
  @pytest.fixture
  def rule(self) -> PromiseChainRule:
    return PromiseChainRule()

  def test_detects_then_chain(self, rule: PromiseChainRule) -> None:
    matches = rule.check("api.js", "fetch(url)\n  .then(r => r.json())\n  .catch(fail);")

    assert [m.line for m in matches] == [2, 3]
    assert rule.kind == IssueKind.STYLE

  def test_skips_files_using_async(self, rule: PromiseChainRule) -> None:
    content = "async function load() {}\nfetch(url).then(render);"
    assert rule.check("api.js", content) == []
