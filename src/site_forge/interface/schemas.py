"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from site_forge.domain.entities import AppPrompt, SourceFile
from site_forge.services.prompt_parser import parse_prompt


class GenerateRequest(BaseModel):
    """Request body for ``POST /generate``, ``POST /files`` and ``POST /assets``."""

    prompt: str
    business_name: str | None = None
    domain: str | None = None

    @field_validator("prompt")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "prompt must not be empty."
            raise ValueError(msg)
        return stripped

    def to_app_prompt(self) -> AppPrompt:
        """Parse the prompt, letting explicit fields override what the text says."""
        parsed = parse_prompt(self.prompt)
        return AppPrompt(
            description=parsed.description,
            business_name=self.business_name or parsed.business_name,
            domain=self.domain or parsed.domain,
            features=parsed.features,
        )


class GenerateResponse(BaseModel):
    """Successful response from ``POST /generate``."""

    name: str
    domain: str
    config: dict[str, Any]
    files: list[str]


class FilesResponse(BaseModel):
    """Successful response from ``POST /files``."""

    name: str
    files: dict[str, str]


class AssetsResponse(BaseModel):
    """Successful response from ``POST /assets``."""

    assets: dict[str, Any]
    checklist: str


class AuditFileIn(BaseModel):
    path: str
    content: str

    def to_source_file(self) -> SourceFile:
        return SourceFile(path=self.path, content=self.content)


class AuditRequest(BaseModel):
    """Request body for ``POST /audit``.

    When *theme_prompt* is given, the files are also checked for generic
    booking terms that the prompt's industry words should have replaced.
    """

    files: list[AuditFileIn] = Field(default_factory=list)
    theme_prompt: str | None = None


class AuditSummaryOut(BaseModel):
    total_files: int
    files_with_issues: int
    total_issues: int
    critical_issues: int
    average_score: int


class AuditResponse(BaseModel):
    """Successful response from ``POST /audit``."""

    summary: AuditSummaryOut
    results: list[dict[str, Any]]
    recommendations: list[str]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
