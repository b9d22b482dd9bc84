"""Document, identity, and report models for the parse and validate pipeline"""

import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class FindingEnum(str, Enum):
    """Restrict validation findings to a predefined set of codes"""
    unknown_layout = "unknown_layout"
    missing_title = "missing_title"
    invalid_category = "invalid_category"


class DocumentId(BaseModel):
    """Identity derived from a file name such as 2015-03-01-test-doubles.md."""
    model_config = ConfigDict(frozen=True)

    date: Optional[datetime.date] = None
    slug: str


class Document(BaseModel):
    """A front-matter block and the body that follows it."""
    model_config = ConfigDict(frozen=True)

    front_matter: dict[str, Any] = Field(default_factory=dict)
    body: str = ""
    path: Optional[str] = None
    identity: Optional[DocumentId] = None

    @property
    def layout(self) -> Optional[Any]:
        return self.front_matter.get("layout")

    @property
    def title(self) -> Optional[Any]:
        return self.front_matter.get("title")

    @property
    def permalink(self) -> Optional[Any]:
        return self.front_matter.get("permalink")

    @property
    def categories(self) -> list:
        """Categories as a list; a plain string is split on whitespace."""
        value = self.front_matter.get("categories")
        if value is None:
            return []
        if isinstance(value, str):
            return value.split()
        if isinstance(value, list):
            return value
        return [value]


class Finding(BaseModel):
    """A single non-fatal validation observation about a document."""
    code: FindingEnum
    message: str
    key: Optional[str] = None


class ValidationResult(BaseModel):
    findings: list[Finding] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.findings

    def codes(self) -> list[FindingEnum]:
        return [f.code for f in self.findings]


class FileReport(BaseModel):
    """Outcome of parsing and validating one file; error is set when parsing failed."""
    path: str
    document: Optional[Document] = None
    error: Optional[str] = None
    findings: list[Finding] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and not self.findings


class BatchReport(BaseModel):
    """Aggregated file reports, ordered by path."""
    files: list[FileReport] = Field(default_factory=list)

    @property
    def parsed(self) -> int:
        return sum(1 for f in self.files if f.error is None)

    @property
    def failed(self) -> int:
        return sum(1 for f in self.files if f.error is not None)

    @property
    def flagged(self) -> int:
        return sum(1 for f in self.files if f.findings)

    @property
    def ok(self) -> bool:
        return all(f.ok for f in self.files)
