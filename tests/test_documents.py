"""Tests for reading documents from disk."""

from pathlib import Path

import pytest
from siskel.documents import FileError, language_tag_for, load_document, load_documents


@pytest.fixture
def project(tmp_path: Path) -> Path:
  (tmp_path / "src").mkdir()
  (tmp_path / "src" / "app.ts").write_text("const x = 1;\n")
  (tmp_path / "src" / "view.html").write_text('<img src="a.png">\n')
  (tmp_path / "src" / "notes.bin").write_bytes(b"\x00\x01")
  (tmp_path / "node_modules").mkdir()
  (tmp_path / "node_modules" / "lib.js").write_text("x\n")
  (tmp_path / "main.py").write_text("def main():\n    pass\n")
  return tmp_path


class TestLanguageTag:
  @pytest.mark.parametrize("path,tag", [
    ("a.ts", "typescript"),
    ("a.tsx", "typescriptreact"),
    ("a.JSX", "javascriptreact"),
    ("a.py", "python"),
    ("a.vue", "vue"),
    ("a.go", "go"),
    ("Makefile", ""),
  ])
  def test_mapping(self, path: str, tag: str) -> None:
    assert language_tag_for(path) == tag


class TestLoadDocuments:
  def test_single_file(self, project: Path) -> None:
    docs = load_documents(["main.py"], cwd=project)

    assert len(docs) == 1
    assert docs[0].path == "main.py"
    assert docs[0].language_tag == "python"
    assert docs[0].text.startswith("def main")

  def test_glob(self, project: Path) -> None:
    docs = load_documents(["src/*.ts"], cwd=project)
    assert [d.path for d in docs] == ["src/app.ts"]

  def test_directory_skips_unknown_and_excluded(self, project: Path) -> None:
    docs = load_documents(["."], cwd=project)

    assert sorted(d.path for d in docs) == ["main.py", "src/app.ts", "src/view.html"]

  def test_duplicates_removed(self, project: Path) -> None:
    docs = load_documents(["main.py", "*.py"], cwd=project)
    assert len(docs) == 1

  def test_nothing_matched(self, project: Path) -> None:
    with pytest.raises(FileError, match="No files matched"):
      load_documents(["*.rs"], cwd=project)

  def test_unreadable_file(self, project: Path) -> None:
    path = project / "bad.py"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(FileError, match="Cannot read"):
      load_document(path, project)
