"""Slug normalisation for file-name identities"""

import re


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated slug; dots and underscores become hyphens."""
    text = text.strip().lower()
    text = re.sub(r'[^\w\s.-]', '', text)
    text = re.sub(r'[\s_.]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
