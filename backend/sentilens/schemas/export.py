"""导出请求模型"""
import enum

from pydantic import Field

from sentilens.schemas.analysis import AnalysisResult
from sentilens.schemas.base import CamelModel
from sentilens.schemas.comparison import ComparisonResult


class ExportFormat(str, enum.Enum):
    PDF = "pdf"
    DOCX = "docx"
    CSV = "csv"
    TXT = "txt"
    JSON = "json"


class AnalysisExportRequest(CamelModel):
    result: AnalysisResult
    original_text: str
    format: ExportFormat = Field(default=ExportFormat.JSON)


class ComparisonExportRequest(CamelModel):
    result: ComparisonResult
    format: ExportFormat = Field(default=ExportFormat.JSON)
