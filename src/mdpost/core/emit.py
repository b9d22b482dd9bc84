"""Serialize Documents back to front-matter text, and to a JSON-ready view"""

from typing import Any

import yaml

from mdpost.core.models import Document
from mdpost.core.parse import DELIMITER, LINE_RE, is_delimiter


def _needs_block(doc: Document) -> bool:
    """Emit a block when there is metadata, or when the body would be mistaken for one."""
    if doc.front_matter:
        return True
    first = LINE_RE.split(doc.body, maxsplit=1)[0]
    return is_delimiter(first)


def serialize_document(doc: Document) -> str:
    """Return front matter + body text that parses back to an equal Document."""
    if not _needs_block(doc):
        return doc.body
    if doc.front_matter:
        header = yaml.safe_dump(doc.front_matter, default_flow_style=False, allow_unicode=True, sort_keys=False)
    else:
        header = ""
    return f"{DELIMITER}\n{header}{DELIMITER}\n{doc.body}"


def to_json(doc: Document, include_body: bool = True) -> dict[str, Any]:
    """Return a JSON-serializable dict view of a Document."""
    return doc.model_dump(mode="json", exclude=None if include_body else {"body"})
