"""文档上传API"""
from fastapi import APIRouter, Depends, File, UploadFile

from sentilens.api.deps import get_app_settings
from sentilens.config import Settings
from sentilens.errors import DocumentExtractionError
from sentilens.services.document_extractor import extract_text

router = APIRouter()


@router.post("/extract")
async def extract_document(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_app_settings),
):
    """提取上传文档中的文本"""
    filename = file.filename or "upload"
    data = await file.read()
    if len(data) > settings.max_upload_bytes:
        raise DocumentExtractionError(f'The file "{filename}" is too large to process.')

    text = extract_text(filename, data)
    if not text.strip():
        raise DocumentExtractionError("No content to analyze.")
    return {"filename": filename, "text": text}
