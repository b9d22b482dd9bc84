"""File discovery, front-matter splitting, and file-name identity"""

import datetime
import re
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml

from mdpost.core.errors import MalformedFrontMatter
from mdpost.core.models import Document, DocumentId
from mdpost.core.utils.slug import slugify


DELIMITER = "---"
MD_EXTENSIONS = (".md", ".markdown")
DATED_NAME_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})-(.+)$')
LINE_RE = re.compile(r'(?<=\n)')
SKIP_DIRS = {"_site", "vendor", "node_modules"}


def is_delimiter(line: str) -> bool:
    """True when line, minus its terminator, is exactly three hyphens."""
    return line in (DELIMITER, DELIMITER + "\n", DELIMITER + "\r\n")


def _load_yaml(text: str, path: Optional[str]) -> dict[str, Any]:
    """Load a front-matter block; anything but a mapping is malformed."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        # +2: one for 1-based lines, one for the opening delimiter
        line = mark.line + 2 if mark is not None else None
        raise MalformedFrontMatter(f"Invalid YAML front matter: {e}", path=path, line=line) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontMatter(
            f"Front matter must be a mapping, got {type(data).__name__}", path=path, line=1,
        )
    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise MalformedFrontMatter(
            f"Front matter keys must be strings, got {bad_keys[0]!r}", path=path, line=1,
        )
    return data


def split_front_matter(text: str, path: Optional[str] = None) -> tuple[dict[str, Any], str]:
    """Return (front_matter, body). Body is the exact text after the closing delimiter line."""
    lines = [line for line in LINE_RE.split(text) if line]
    if not lines or not is_delimiter(lines[0]):
        return {}, text

    for i in range(1, len(lines)):
        if is_delimiter(lines[i]):
            return _load_yaml("".join(lines[1:i]), path), "".join(lines[i + 1:])

    raise MalformedFrontMatter("Front matter opened but never closed", path=path, line=1)


def parse_document(text: str, path: Optional[str] = None) -> Document:
    """Parse raw text into a Document. Raises MalformedFrontMatter; no partial result."""
    front_matter, body = split_front_matter(text, path)
    return Document(front_matter=front_matter, body=body, path=path)


def identity_from_name(path: Path) -> DocumentId:
    """Derive (date, slug) from a YYYY-MM-DD-slug file name; undated names get date=None."""
    m = DATED_NAME_RE.match(path.stem)
    if m:
        year, month, day, rest = m.groups()
        try:
            return DocumentId(date=datetime.date(int(year), int(month), int(day)), slug=slugify(rest))
        except ValueError:
            pass  # e.g. 2015-02-30: keep the prefix in the slug
    return DocumentId(slug=slugify(path.stem))


def parse_file(path: Path) -> Document:
    """Read a single file and parse it into a Document carrying its path and identity."""
    raw = path.read_text(encoding="utf-8-sig")
    doc = parse_document(raw, path=str(path))
    return doc.model_copy(update={"identity": identity_from_name(path)})


def _skipped(rel: Path) -> bool:
    """Hidden entries and generated trees (_site, vendor) are not posts."""
    return any(part.startswith(".") or part in SKIP_DIRS for part in rel.parts)


def discover_files(path: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> list[Path]:
    """Return sorted matching files under path, or [path] if a single matching file."""
    suffixes = {e.lower() for e in extensions}
    if path.is_file():
        return [path] if path.suffix.lower() in suffixes else []
    return sorted(
        p for p in path.rglob('*')
        if p.is_file() and p.suffix.lower() in suffixes and not _skipped(p.relative_to(path))
    )
