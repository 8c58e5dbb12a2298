"""API routes — thin controllers that delegate to the pipeline services."""

from __future__ import annotations

from fastapi import APIRouter

from site_forge.domain.serialization import to_jsonable
from site_forge.interface.schemas import (
    AssetsResponse,
    AuditRequest,
    AuditResponse,
    AuditSummaryOut,
    FilesResponse,
    GenerateRequest,
    GenerateResponse,
)
from site_forge.services.asset_generator import generate_asset_checklist
from site_forge.services.content_auditor import audit_files
from site_forge.services.file_emitter import generate_file_structure
from site_forge.services.generate_app import generate_app
from site_forge.services.prompt_parser import parse_theme_prompt
from site_forge.services.theme_compiler import generate_theme

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(body: GenerateRequest) -> GenerateResponse:
    """Compile a prompt into a full app configuration."""
    config = generate_app(body.to_app_prompt())
    files = generate_file_structure(config)
    return GenerateResponse(
        name=config.name,
        domain=config.domain,
        config=to_jsonable(config),
        files=sorted(files),
    )


@router.post("/files", response_model=FilesResponse)
async def render_files(body: GenerateRequest) -> FilesResponse:
    """Render the generated app's files without writing them anywhere."""
    config = generate_app(body.to_app_prompt())
    return FilesResponse(name=config.name, files=generate_file_structure(config))


@router.post("/assets", response_model=AssetsResponse)
async def asset_suggestions(body: GenerateRequest) -> AssetsResponse:
    """Asset specifications and a markdown checklist for the prompt's theme."""
    config = generate_app(body.to_app_prompt())
    return AssetsResponse(
        assets=to_jsonable(config.assets),
        checklist=generate_asset_checklist(config.assets),
    )


@router.post(
    "/audit",
    response_model=AuditResponse,
    responses={422: {"description": "Malformed file list"}},
)
async def audit_content(body: AuditRequest) -> AuditResponse:
    """Audit the supplied files for template leftovers and SEO gaps."""
    theme = generate_theme(parse_theme_prompt(body.theme_prompt)) if body.theme_prompt else None
    report = audit_files([f.to_source_file() for f in body.files], theme)
    return AuditResponse(
        summary=AuditSummaryOut(**to_jsonable(report.summary)),
        results=to_jsonable(report.results),
        recommendations=list(report.recommendations),
    )
