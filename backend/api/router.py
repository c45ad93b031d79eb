import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.datastructures import UploadFile as StarletteUploadFile

from api.dependencies import get_skill_vocabulary
from config import settings
from models.requests import MatchRequest
from models.responses import HealthResponse
from models.schemas.match_result import MatchResult
from services import ranking, text_extractor
from services.errors import ExtractionFailure, InvalidTopK
from services.skill_vocabulary import SkillVocabulary

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health(vocabulary: SkillVocabulary = Depends(get_skill_vocabulary)):
    return HealthResponse(status="ok", vocabulary_size=len(vocabulary))


@router.post("/match", response_model=list[MatchResult])
@limiter.limit(settings.rate_limit)
def match(
    request: Request,
    body: MatchRequest,
    vocabulary: SkillVocabulary = Depends(get_skill_vocabulary),
):
    try:
        return ranking.rank_candidate(
            body.candidate, body.jobs, body.top_k, vocabulary=vocabulary
        )
    except InvalidTopK as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/parse", response_class=PlainTextResponse)
@limiter.limit(settings.rate_limit)
async def parse(request: Request, file: UploadFile | str | None = File(None)):
    # Parts without a filename arrive as plain form strings
    if not isinstance(file, StarletteUploadFile) or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    # Read and validate size
    content = await file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        text = text_extractor.extract_text(file.filename, content)
    except ExtractionFailure as e:
        logger.warning("Rejected upload %r: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))

    return PlainTextResponse(text)
