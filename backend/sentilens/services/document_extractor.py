"""上传文档的文本提取"""
import io

import docx
from pypdf import PdfReader

from sentilens.errors import DocumentExtractionError
from sentilens.utils.logger import get_logger

logger = get_logger(__name__)

TEXT_EXTENSIONS = (".txt", ".md", ".csv", ".json", ".xml")


def _decode_text(data: bytes) -> str:
    return data.decode("utf-8-sig")


def _extract_pdf(data: bytes, filename: str) -> str:
    try:
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted and not reader.decrypt(""):
            raise DocumentExtractionError(
                f'Could not read the PDF "{filename}" as it is password-protected.'
            )
        pages_text = [(page.extract_text() or "") for page in reader.pages]
    except DocumentExtractionError:
        raise
    except Exception as e:
        logger.error(f"Error parsing PDF file {filename}: {e}")
        raise DocumentExtractionError(
            f'Failed to parse the PDF file "{filename}". It may be corrupted.'
        ) from e
    return "\n\n".join(pages_text).strip()


def _extract_docx(data: bytes, filename: str) -> str:
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as e:
        logger.error(f"Error parsing DOCX file {filename}: {e}")
        raise DocumentExtractionError(
            f'Failed to parse the DOCX file "{filename}". '
            "It may be corrupted or in an unsupported format."
        ) from e
    return "\n\n".join(paragraph.text for paragraph in document.paragraphs)


def extract_text(filename: str, data: bytes) -> str:
    """按扩展名提取文本，失败时抛出带用户提示的 DocumentExtractionError"""
    name = filename.lower()

    if name.endswith(TEXT_EXTENSIONS):
        try:
            return _decode_text(data)
        except UnicodeDecodeError as e:
            logger.error(f"Error reading text file {filename}: {e}")
            raise DocumentExtractionError(f'Could not read the text file "{filename}".') from e

    if name.endswith(".pdf"):
        return _extract_pdf(data, filename)

    if name.endswith(".docx"):
        return _extract_docx(data, filename)

    if name.endswith(".doc"):
        raise DocumentExtractionError(
            "Unsupported file type: The classic .doc format is not supported. "
            "Please use .docx instead."
        )

    try:
        return _decode_text(data)
    except UnicodeDecodeError as e:
        raise DocumentExtractionError(
            f'Unsupported file type: Could not extract text from "{filename}".'
        ) from e
