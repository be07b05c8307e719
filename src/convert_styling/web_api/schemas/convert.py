"""
Convert Schemas
===============
Response models for the convert endpoint.

The request body is deliberately an untyped JSON object: it is validated by
``convert_styling.core.validate`` so that the CLI, the Python API and HTTP
callers share one set of rules and one error message format.
"""
from typing import Any, Dict

from pydantic import BaseModel, Field


class ConvertSummary(BaseModel):
    """Summary block of a migration run"""

    mode: str
    project_root: str
    apply: bool
    files_enumerated: int = Field(default=0)
    guide_sha1: str
    findings: int = Field(default=0)
    changes: int = Field(default=0)
    write_failures: int = Field(default=0)
    findings_by_kind: Dict[str, int] = Field(default_factory=dict)


class ConvertResponse(BaseModel):
    """Response from a convert operation"""

    text: str = Field(..., description="Human-readable report")
    summary: ConvertSummary
    result: Dict[str, Any] = Field(default_factory=dict)

    model_config = {
        "json_schema_extra": {
            "example": {
                "text": "convert-styling results\n...",
                "summary": {
                    "mode": "uniwind-migration",
                    "project_root": "my-app (in-memory)",
                    "apply": False,
                    "files_enumerated": 1,
                    "guide_sha1": "0" * 40,
                    "findings": 1,
                    "changes": 1,
                    "write_failures": 0,
                    "findings_by_kind": {"css-header-needs-normalization": 1},
                },
                "result": {},
            }
        }
    }
