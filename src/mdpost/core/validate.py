"""Front-matter validation against a layout allow-list"""

from typing import Iterable

from mdpost.core.models import Document, Finding, FindingEnum, ValidationResult


DEFAULT_LAYOUTS = ("post", "page")
DEFAULT_TITLE_REQUIRED = ("post",)


def _is_category(value) -> bool:
    """A category is a single lowercase token."""
    return isinstance(value, str) and bool(value) and value == value.lower() and not any(c.isspace() for c in value)


def validate(
    doc: Document,
    layouts: Iterable[str] = DEFAULT_LAYOUTS,
    title_required: Iterable[str] = DEFAULT_TITLE_REQUIRED,
    ) -> ValidationResult:
    """Check layout, title, and categories. Never raises; findings are collected.

    A document without a layout key is not flagged.
    """
    findings: list[Finding] = []
    layout = doc.layout
    layouts, title_required = list(layouts), list(title_required)

    if layout is not None and layout not in layouts:
        findings.append(Finding(
            code=FindingEnum.unknown_layout,
            message=f"Unknown layout {layout!r}",
            key="layout",
        ))
    elif layout is not None and layout in title_required:
        title = doc.title
        if title is None or not str(title).strip():
            findings.append(Finding(
                code=FindingEnum.missing_title,
                message=f"Layout {layout!r} requires a non-empty title",
                key="title",
            ))

    for category in doc.categories:
        if not _is_category(category):
            findings.append(Finding(
                code=FindingEnum.invalid_category,
                message=f"Category {category!r} is not a lowercase token",
                key="categories",
            ))

    return ValidationResult(findings=findings)
