"""Reading source files from disk into Documents."""

import glob as globmod
from pathlib import Path

from siskel.models import Document


class FileError(Exception):
  """File operation failed."""


# Extension -> editor language id
_LANGUAGE_TAGS: dict[str, str] = {
  "js": "javascript",
  "mjs": "javascript",
  "cjs": "javascript",
  "jsx": "javascriptreact",
  "ts": "typescript",
  "mts": "typescript",
  "cts": "typescript",
  "tsx": "typescriptreact",
  "py": "python",
  "html": "html",
  "htm": "html",
  "vue": "vue",
  "svelte": "svelte",
  "go": "go",
  "rs": "rust",
  "java": "java",
  "rb": "ruby",
  "php": "php",
  "cs": "csharp",
  "css": "css",
  "md": "markdown",
  "sh": "shellscript",
  "sql": "sql",
  "yaml": "yaml",
  "yml": "yaml",
}

# Directories never scanned when a directory is given
_EXCLUDED_DIRS: set[str] = {
  "node_modules",
  ".git",
  "__pycache__",
  ".venv",
  "venv",
  "dist",
  "build",
  ".next",
  "target",
  "vendor",
}


def language_tag_for(path: str | Path) -> str:
  """Language id for a file path, or "" if the extension is unknown."""
  suffix = Path(path).suffix.lower().lstrip(".")
  return _LANGUAGE_TAGS.get(suffix, "")


def load_document(file_path: Path, base_path: Path | None = None) -> Document:
  """Read one file into a Document.

  Raises:
    FileError: The file cannot be read or is not valid text.
  """
  base = base_path or Path.cwd()
  try:
    rel_path = str(file_path.relative_to(base))
  except ValueError:
    rel_path = str(file_path)

  try:
    text = file_path.read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    raise FileError(f"Cannot read {rel_path}: {e}") from e

  return Document(path=rel_path, text=text, language_tag=language_tag_for(file_path))


def load_documents(patterns: list[str], cwd: Path | None = None) -> list[Document]:
  """Read files, globs and directories into Documents.

  Directories are scanned recursively for files with a known extension,
  skipping dependency and build directories.

  Raises:
    FileError: Nothing matched, or a matched file cannot be read.
  """
  base_path = cwd or Path.cwd()
  paths = _resolve_patterns(patterns, base_path)

  if not paths:
    raise FileError(
      f"No files matched: {', '.join(patterns)}\n"
      "Use glob patterns like: siskel review 'src/**/*.ts'"
    )

  return [load_document(p, base_path) for p in paths]


def _resolve_patterns(patterns: list[str], base_path: Path) -> list[Path]:
  """Expand patterns and return unique file paths in match order."""
  seen: set[Path] = set()
  result: list[Path] = []

  for pattern in patterns:
    for path in _expand_pattern(pattern, base_path):
      if path not in seen and path.is_file():
        seen.add(path)
        result.append(path)

  return result


def _expand_pattern(pattern: str, base_path: Path) -> list[Path]:
  p = Path(pattern)
  full_path = p if p.is_absolute() else base_path / p

  if full_path.is_dir():
    return sorted(
      path for path in full_path.rglob("*")
      if path.suffix.lower().lstrip(".") in _LANGUAGE_TAGS
      and not set(path.relative_to(full_path).parts) & _EXCLUDED_DIRS
    )
  if any(c in pattern for c in "*?["):
    return sorted(Path(match) for match in globmod.glob(str(full_path), recursive=True))
  return [full_path]
