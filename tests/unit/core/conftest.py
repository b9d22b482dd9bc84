"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_POST = """\
---
layout: post
title: Test Doubles
categories:
  - testing
  - tdd
permalink: /testing/test-doubles/
---

A *test double* stands in for a real collaborator.

```python
class DummyLogger:
    def log(self, msg):
        pass
```
"""

SAMPLE_PLAIN = """\
# Notes

Stubs return canned answers; mocks verify calls.
"""


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path):
    """A _posts tree with one good post, one flagged post, and one malformed post."""
    posts = tmp_path / "_posts"
    posts.mkdir()
    (posts / "2015-03-01-test-doubles.md").write_text(SAMPLE_POST)
    (posts / "2015-03-08-stubs.md").write_text("---\nlayout: post\ntitle: ''\n---\nStubs.\n")
    (posts / "2015-03-15-spies.md").write_text("---\nlayout: post\ntitle: Spies\n")
    (posts / "notes.txt").write_text("not a post")
    return posts


@pytest.fixture(name="sample_post")
def sample_post_fixture():
    return SAMPLE_POST


@pytest.fixture(name="sample_plain")
def sample_plain_fixture():
    return SAMPLE_PLAIN
