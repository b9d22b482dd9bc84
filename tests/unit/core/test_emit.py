"""Unit tests for core/emit.py"""

import datetime

import pytest

from mdpost.core.emit import serialize_document, to_json
from mdpost.core.models import Document, DocumentId
from mdpost.core.parse import parse_document


@pytest.mark.parametrize("text", [
    "---\nlayout: post\ntitle: Dummies\ncategories:\n  - testing\n---\nBody\n",
    "---\n---\n---\nstill body\n",
    "---\ntitle: 'yes'\ndate: 2015-03-01\ncount: 3\n---\n",
    "---\ntitle: \"Dependency Injection: a primer\"\npermalink: /di/\n---\r\nwindows\r\n",
    "plain body, no metadata\n",
    "",
])
def test_round_trip(text):
    """Serializing a parsed Document and parsing it again gives an equal Document."""
    doc = parse_document(text)
    assert parse_document(serialize_document(doc)) == doc


def test_round_trip_sample_post(sample_post):
    doc = parse_document(sample_post)
    again = parse_document(serialize_document(doc))
    assert again == doc
    assert list(again.front_matter) == list(doc.front_matter)


def test_serialize_without_front_matter_is_body():
    assert serialize_document(Document(body="# Hi\n")) == "# Hi\n"


def test_serialize_empty_block_when_body_looks_like_delimiter():
    doc = Document(body="---\nnot metadata\n")
    assert serialize_document(doc) == "---\n---\n---\nnot metadata\n"


def test_serialize_layout():
    text = serialize_document(Document(front_matter={"layout": "post", "title": "Stubs"}, body="b\n"))
    assert text == "---\nlayout: post\ntitle: Stubs\n---\nb\n"


def test_to_json_includes_identity_and_dates():
    doc = Document(
        front_matter={"title": "Spies", "date": datetime.date(2015, 3, 15)},
        body="b",
        path="_posts/2015-03-15-spies.md",
        identity=DocumentId(date=datetime.date(2015, 3, 15), slug="spies"),
    )
    data = to_json(doc)
    assert data["identity"] == {"date": "2015-03-15", "slug": "spies"}
    assert data["front_matter"]["date"] == "2015-03-15"
    assert data["body"] == "b"


def test_to_json_without_body():
    assert "body" not in to_json(Document(body="b"), include_body=False)
