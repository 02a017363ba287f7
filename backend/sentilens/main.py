"""FastAPI应用入口"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import sessionmaker

from sentilens.analyzers.accuracy import load_accuracy_samples
from sentilens.analyzers.comparison import ComparisonAnalyzer
from sentilens.analyzers.llm_client import LLMClient
from sentilens.analyzers.sentiment import SentimentAnalyzer
from sentilens.api import accuracy, analysis, documents, exports, history
from sentilens.config import Settings, get_settings
from sentilens.database import create_session_factory, init_db
from sentilens.errors import (
    AnalysisError,
    ComparisonError,
    DocumentExtractionError,
    ExportError,
    InputValidationError,
    SentilensError,
)
from sentilens.services.history_store import HistoryStore
from sentilens.utils.logger import setup_logging
from prompts.analysis_prompts import PROMPT_VERSION

logger = logging.getLogger(__name__)

CLIENT_ERRORS = (InputValidationError, DocumentExtractionError, ExportError)
UPSTREAM_ERRORS = (AnalysisError, ComparisonError)


async def sentilens_error_handler(request: Request, exc: SentilensError):
    """领域错误 -> 用户可见的 detail"""
    status_code = 400 if isinstance(exc, CLIENT_ERRORS) else 502
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def create_app(
    settings: Optional[Settings] = None,
    llm: Optional[LLMClient] = None,
    session_factory: Optional[sessionmaker] = None,
) -> FastAPI:
    """按显式配置组装应用（便于测试替换 LLM 与数据库）"""
    settings = settings or get_settings()
    setup_logging(settings)

    if llm is None:
        if not settings.llm_api_key:
            logger.warning("LLM_API_KEY is empty; analysis requests will fail until it is set")
        llm = LLMClient.from_settings(settings)
    session_factory = session_factory or create_session_factory(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting application (prompts %s)...", PROMPT_VERSION)
        init_db(session_factory)
        logger.info("Application startup complete")
        yield
        logger.info("Application shutdown complete")

    app = FastAPI(
        title="Sentilens",
        description="LLM 情感、情绪、关键词与内容审核分析API",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.sentiment_analyzer = SentimentAnalyzer(llm)
    app.state.comparison_analyzer = ComparisonAnalyzer(llm)
    app.state.history_store = HistoryStore(
        session_factory,
        key=settings.history_key,
        limit=settings.history_limit,
    )
    app.state.accuracy_samples = load_accuracy_samples()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,  # 使用 * 时必须为 False
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[exports.NOTICE_HEADER, "Content-Disposition"],
    )

    for error_cls in (*CLIENT_ERRORS, *UPSTREAM_ERRORS):
        app.add_exception_handler(error_cls, sentilens_error_handler)

    @app.get("/health")
    async def health_check():
        """健康检查接口"""
        return {
            "status": "healthy",
            "version": "1.0.0",
            "prompt_version": PROMPT_VERSION,
            "model": settings.llm_model,
        }

    # 注册路由
    app.include_router(analysis.router, prefix="/api/v1", tags=["分析"])
    app.include_router(documents.router, prefix="/api/v1/documents", tags=["文档"])
    app.include_router(history.router, prefix="/api/v1/history", tags=["历史记录"])
    app.include_router(exports.router, prefix="/api/v1/exports", tags=["导出"])
    app.include_router(accuracy.router, prefix="/api/v1", tags=["准确率"])

    return app
