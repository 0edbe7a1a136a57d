from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_assistant
from config import settings
from models.requests import ChatRequest, PerformanceInsightsRequest, QuickAnalyzeRequest
from models.responses import ChatReply, PerformanceInsights, ResumeAnalysis
from services import resume_parser
from services.assistant import HRAssistant

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(assistant: HRAssistant = Depends(get_assistant)):
    return {
        "status": "ok",
        "ai_configured": assistant.is_configured,
        "model": settings.gemini_model,
    }


@router.post("/analyze/resume", response_model=ResumeAnalysis)
@limiter.limit(settings.rate_limit)
async def analyze_resume(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str | None = Form(None),
    assistant: HRAssistant = Depends(get_assistant),
):
    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if job_description and len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    try:
        resume_text = resume_parser.extract_resume_text(resume_file.filename, content)
    except resume_parser.UnsupportedFileType:
        raise HTTPException(status_code=400, detail="Only PDF, DOCX or TXT files are accepted")
    except Exception:
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from resume file")

    return await assistant.analyze_resume(resume_text, job_description)


@router.post("/analyze/quick", response_model=ResumeAnalysis)
@limiter.limit(settings.rate_limit)
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    assistant: HRAssistant = Depends(get_assistant),
):
    return await assistant.analyze_resume(body.resume_text, body.job_description)


@router.post("/chat", response_model=ChatReply)
@limiter.limit(settings.rate_limit)
async def chat(
    request: Request,
    body: ChatRequest,
    assistant: HRAssistant = Depends(get_assistant),
):
    return await assistant.chat(body.message, body.context)


@router.post("/insights/performance", response_model=PerformanceInsights)
@limiter.limit(settings.rate_limit)
async def performance_insights(
    request: Request,
    body: PerformanceInsightsRequest,
    assistant: HRAssistant = Depends(get_assistant),
):
    return PerformanceInsights(insights=await assistant.generate_performance_insights(body.data))
