"""Tests for Python rules."""

import pytest
from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily
from siskel.rules.python import BareExceptRule, MissingReturnAnnotationRule, SqlInterpolationRule


class TestSqlInterpolationRule:
  @pytest.fixture
  def rule(self) -> SqlInterpolationRule:
    return SqlInterpolationRule()

  def test_properties(self, rule: SqlInterpolationRule) -> None:
    assert rule.id == "PY001"
    assert rule.kind == IssueKind.SECURITY
    assert rule.family == LanguageFamily.PYTHON

  @pytest.mark.parametrize("line", [
    'cursor.execute(f"SELECT * FROM users WHERE id = {user_id}")',
    'cursor.execute("SELECT * FROM users WHERE id = %s" % user_id)',
    'cursor.execute("SELECT * FROM users WHERE id = {}".format(user_id))',
    'cursor.execute("SELECT * FROM users WHERE id = " + user_id)',
    'cursor.executemany(f"INSERT INTO t VALUES ({v})", rows)',
    'cursor.execute("SELECT * FROM t WHERE name = \'bob\' AND id = %s" % uid)',
    'cursor.execute("""SELECT * FROM t WHERE id = %s""" % uid)',
    'cursor.execute("SELECT * FROM t WHERE name = \'x\' AND id = {}".format(uid))',
    "cursor.execute('SELECT * FROM t WHERE name = \"x\" AND id = ' + uid)",
  ])
  def test_detects_formatted_sql(self, rule: SqlInterpolationRule, line: str) -> None:
    matches = rule.check("db.py", line)

    assert len(matches) == 1
    assert matches[0].severity == Severity.CRITICAL

  def test_ignores_parameterized_query(self, rule: SqlInterpolationRule) -> None:
    line = 'cursor.execute("SELECT * FROM users WHERE id = %s", (user_id,))'
    assert rule.check("db.py", line) == []

  def test_ignores_parameterized_query_with_quoted_literal(self, rule: SqlInterpolationRule) -> None:
    line = 'cursor.execute("SELECT * FROM t WHERE name = \'bob\' AND id = %s", (uid,))'
    assert rule.check("db.py", line) == []

  def test_ignores_parameterized_triple_quoted_query(self, rule: SqlInterpolationRule) -> None:
    line = 'cursor.execute("""SELECT * FROM t WHERE id = %s""", (uid,))'
    assert rule.check("db.py", line) == []

  def test_ignores_comments(self, rule: SqlInterpolationRule) -> None:
    line = '# cursor.execute(f"SELECT * FROM users WHERE id = {user_id}")'
    assert rule.check("db.py", line) == []


class TestBareExceptRule:
  @pytest.fixture
  def rule(self) -> BareExceptRule:
    return BareExceptRule()

  def test_detects_bare_except(self, rule: BareExceptRule) -> None:
    content = "try:\n    run()\nexcept:\n    pass"
    matches = rule.check("app.py", content)

    assert len(matches) == 1
    assert matches[0].line == 3
    assert matches[0].severity == Severity.WARNING

  def test_ignores_typed_except(self, rule: BareExceptRule) -> None:
    content = "try:\n    run()\nexcept ValueError:\n    pass\nexcept Exception as e:\n    raise"
    assert rule.check("app.py", content) == []


class TestMissingReturnAnnotationRule:
  @pytest.fixture
  def rule(self) -> MissingReturnAnnotationRule:
    return MissingReturnAnnotationRule()

  @pytest.mark.parametrize("line", [
    "def load(path):",
    "    def helper(x, y):",
    "async def fetch(url):",
    "def run():  # entry point",
  ])
  def test_detects_missing_annotation(self, rule: MissingReturnAnnotationRule, line: str) -> None:
    matches = rule.check("app.py", line)

    assert len(matches) == 1
    assert matches[0].severity == Severity.INFO

  def test_message_names_function(self, rule: MissingReturnAnnotationRule) -> None:
    matches = rule.check("app.py", "def load(path):")
    assert "'load'" in matches[0].message

  @pytest.mark.parametrize("line", [
    "def load(path: str) -> dict:",
    "async def fetch(url) -> bytes:",
    "def run() -> None:  # entry point",
  ])
  def test_ignores_annotated(self, rule: MissingReturnAnnotationRule, line: str) -> None:
    assert rule.check("app.py", line) == []

  def test_skips_multiline_headers(self, rule: MissingReturnAnnotationRule) -> None:
    content = "def load(\n    path,\n):\n    pass"
    assert rule.check("app.py", content) == []
