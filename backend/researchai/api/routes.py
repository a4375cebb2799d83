from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from sqlalchemy.orm import Session

from researchai.config import LLM_MODEL
from researchai.db import get_db, record_generation, recent_generations
from researchai.documents import DocumentError, load_document
from researchai.formatters import OUTPUT_FORMATS
from researchai.inference import LLMClient, get_llm_client
from researchai.pipeline import (
    CONTENT_CATALOG,
    InvalidContentType,
    run_content_generation,
    run_paper_analysis,
)
from researchai.schemas import (
    GenerateContentRequest,
    GenerationLogEntry,
    StructuredGenerateRequest,
)

router = APIRouter()


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/health")
def health():
    return {"ok": True, "model": LLM_MODEL}


@router.get("/api/content-types")
def content_types():
    return CONTENT_CATALOG


# ============================
# ANALYZE
# ============================

@router.post("/api/analyze-paper")
def analyze_paper(
    file: Optional[UploadFile] = File(None),
    client: LLMClient = Depends(get_llm_client),
    db: Optional[Session] = Depends(get_db),
):
    if file is None:
        return error_response("No file provided", 400)

    try:
        data = file.file.read()
        document = load_document(file.filename, file.content_type, data)
    except DocumentError as e:
        print(f"[Analyze] Rejected upload {file.filename!r}: {e}")
        return error_response(str(e), 400)

    try:
        print(f"[Analyze] {document.filename} ({document.kind}, {document.size} bytes)")
        analysis, fallback_used = run_paper_analysis(document.text, client)
    except Exception as e:
        print(f"[Analyze] Analysis error: {e}")
        return error_response("Failed to analyze paper", 500)

    payload = analysis.to_dict()
    record_generation(
        db,
        kind="analysis",
        source_text=document.text,
        output=analysis.model_dump_json(by_alias=True),
        fallback_used=fallback_used,
    )
    return payload


# ============================
# GENERATE (raw text)
# ============================

@router.post("/api/generate-content")
def generate_content(
    request: GenerateContentRequest,
    client: LLMClient = Depends(get_llm_client),
    db: Optional[Session] = Depends(get_db),
):
    if not request.paper_content or not request.content_type:
        return error_response("Missing required parameters", 400)

    try:
        result = run_content_generation(
            request.paper_content,
            request.content_type,
            client,
            analysis_result=request.analysis_result,
        )
    except InvalidContentType:
        return error_response("Invalid content type", 400)
    except Exception as e:
        print(f"[Generate] Content generation error: {e}")
        return error_response("Failed to generate content", 500)

    record_generation(
        db,
        kind="generation",
        source_text=request.paper_content,
        output=result.generated_content,
        content_type=result.content_type.value,
    )
    return result.to_dict()


# ============================
# GENERATE (structured)
# ============================

@router.post("/api/generate/{kind}")
def generate_structured(
    kind: str,
    request: StructuredGenerateRequest,
    client: LLMClient = Depends(get_llm_client),
    db: Optional[Session] = Depends(get_db),
):
    output_format = OUTPUT_FORMATS.get(kind)
    if output_format is None:
        return error_response("Unknown output format", 404)

    if not request.paper_content or not request.paper_content.strip():
        return error_response("Please paste your research paper content first", 400)

    try:
        result = run_content_generation(
            request.paper_content,
            output_format.content_type.value,
            client,
            analysis_result=request.analysis_result,
        )
    except Exception as e:
        print(f"[Generate] {output_format.label} error: {e}")
        return error_response(f"Failed to generate {output_format.label}", 500)

    structured = output_format.parse(result.generated_content)

    record_generation(
        db,
        kind="generation",
        source_text=request.paper_content,
        output=result.generated_content,
        content_type=result.content_type.value,
    )

    payload = structured.model_dump(by_alias=True)
    payload["markdown"] = output_format.render(structured)
    payload["filename"] = output_format.filename
    return payload


# ============================
# EXPORT
# ============================

@router.post("/api/export/{kind}")
def export_markdown(kind: str, body: Dict[str, Any]):
    output_format = OUTPUT_FORMATS.get(kind)
    if output_format is None:
        return error_response("Unknown output format", 404)

    try:
        record = output_format.model.model_validate(body)
    except ValidationError as e:
        print(f"[Export] Invalid {output_format.label} payload: {e.error_count()} errors")
        return error_response(f"Invalid {output_format.label} payload", 400)

    return Response(
        content=output_format.render(record),
        media_type="text/markdown",
        headers={"Content-Disposition": f'attachment; filename="{output_format.filename}"'},
    )


# ============================
# HISTORY
# ============================

@router.get("/api/generations")
def list_generations(
    limit: int = Query(20, ge=1, le=200),
    db: Optional[Session] = Depends(get_db),
):
    return [
        GenerationLogEntry.model_validate(entry).model_dump(mode="json")
        for entry in recent_generations(db, limit)
    ]
