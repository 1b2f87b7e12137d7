"""Public interchange models for rpslkit records."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class AttributeItem(BaseModel):
    """One attribute value. Multi-valued attributes contribute one item per value."""
    name: str
    value: str

    model_config = ConfigDict(extra="forbid")


class RecordDocument(BaseModel):
    """Array/JSON form of a record."""
    type: str
    primary_key: Optional[str] = None
    attributes: List[AttributeItem]

    model_config = ConfigDict(extra="forbid")


class ValidationIssue(BaseModel):
    """A single validation issue (error or warning)."""
    code: str  # "MISSING_REQUIRED" | "CHECK_FAILED" | "MISSING_PRIMARY_KEY"
    message: str
    attribute: Optional[str] = None  # Attribute name for attribute-level issues


class ValidationResult(BaseModel):
    """Result of validating a record."""
    ok: bool  # True if no errors (warnings don't block)
    type: str
    primary_key: Optional[str] = None
    errors: List[ValidationIssue]  # Blocking issues
    warnings: List[ValidationIssue]  # Non-blocking issues
