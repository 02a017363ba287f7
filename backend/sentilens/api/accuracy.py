"""准确率与样本API"""
from typing import List

from fastapi import APIRouter, Request

from sentilens.analyzers.accuracy import build_accuracy_report
from sentilens.schemas import AccuracyReport, SampleText

router = APIRouter()


@router.get("/accuracy", response_model=AccuracyReport)
async def accuracy_report(request: Request):
    """人工标注与 API 结果的对比报告"""
    return build_accuracy_report(request.app.state.accuracy_samples)


@router.get("/samples", response_model=List[SampleText])
async def list_samples(request: Request):
    return [
        SampleText(id=s.id, text=s.text, manual_sentiment=s.manual_sentiment)
        for s in request.app.state.accuracy_samples
    ]
