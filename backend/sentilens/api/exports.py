"""导出API"""
from fastapi import APIRouter
from fastapi.responses import Response

from sentilens.schemas import AnalysisExportRequest, ComparisonExportRequest
from sentilens.services.export_service import ExportedFile, export_analysis, export_comparison

router = APIRouter()

NOTICE_HEADER = "X-Export-Notice"


def file_response(exported: ExportedFile) -> Response:
    headers = {"Content-Disposition": f'attachment; filename="{exported.filename}"'}
    if exported.notice:
        headers[NOTICE_HEADER] = exported.notice
    return Response(content=exported.content, media_type=exported.media_type, headers=headers)


@router.post("/analysis")
async def download_analysis(payload: AnalysisExportRequest):
    return file_response(export_analysis(payload.result, payload.original_text, payload.format))


@router.post("/comparison")
async def download_comparison(payload: ComparisonExportRequest):
    return file_response(export_comparison(payload.result, payload.format))
