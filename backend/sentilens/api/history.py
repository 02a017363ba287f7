"""历史记录API"""
from typing import List

from fastapi import APIRouter, Depends, Query

from sentilens.analyzers.history_stats import build_history_dashboard
from sentilens.api.deps import get_history_store
from sentilens.api.exports import file_response
from sentilens.schemas import ExportFormat, HistoryDashboardResponse, HistoryItem
from sentilens.services.export_service import export_history
from sentilens.services.history_store import HistoryStore

router = APIRouter()


@router.get("", response_model=List[HistoryItem])
async def list_history(history: HistoryStore = Depends(get_history_store)):
    """历史记录（最近优先）"""
    return history.load_history()


@router.delete("")
async def clear_history(history: HistoryStore = Depends(get_history_store)):
    history.clear()
    return {"status": "cleared"}


@router.get("/dashboard", response_model=HistoryDashboardResponse)
async def history_dashboard(history: HistoryStore = Depends(get_history_store)):
    """历史聚合统计，无数据时 dashboard 为 null"""
    return HistoryDashboardResponse(dashboard=build_history_dashboard(history.load_history()))


@router.get("/export")
async def download_history(
    format: ExportFormat = Query(default=ExportFormat.JSON),
    history: HistoryStore = Depends(get_history_store),
):
    return file_response(export_history(history.load_history(), format))
