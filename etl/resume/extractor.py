"""
Document Text Extractor - Turn uploaded resume bytes into plain text.

Supports:
- PDF (application/pdf): text of every page, in the order pypdf yields it
- Word Documents (.docx media type): paragraph text, plus table rows

Any other media type yields empty text. A document that cannot be read as
its declared type raises ExtractionFailed instead of returning partial text.
"""
import io
import logging
from typing import Optional

from docx import Document
from pypdf import PdfReader

from core.exceptions import ExtractionFailed

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = 'application/pdf'
DOCX_MEDIA_TYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'


def normalize_media_type(media_type: Optional[str]) -> str:
    """Lowercase a media type and drop parameters such as charset."""
    if not media_type:
        return ''
    return media_type.split(';', 1)[0].strip().lower()


class DocumentTextExtractor:
    """Extract plain text from uploaded resume documents.

    Documents are read from memory; nothing is written to disk.
    """

    SUPPORTED_MEDIA_TYPES = {PDF_MEDIA_TYPE, DOCX_MEDIA_TYPE}

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def extract(self, content: bytes, media_type: Optional[str]) -> str:
        """Extract text from document bytes.

        Args:
            content: Raw document bytes
            media_type: Declared media type of the upload

        Returns:
            Extracted text, or "" for unsupported media types

        Raises:
            ExtractionFailed: If the bytes are not a valid document of the declared type
        """
        kind = normalize_media_type(media_type)

        if kind == PDF_MEDIA_TYPE:
            return self._extract_pdf(content)
        elif kind == DOCX_MEDIA_TYPE:
            return self._extract_docx(content)

        self.logger.info(f"Unsupported media type for extraction: {media_type}")
        return ""

    def _extract_pdf(self, content: bytes) -> str:
        """Extract text from all pages of a PDF."""
        try:
            reader = PdfReader(io.BytesIO(content))

            pages_text = []
            for page in reader.pages:
                page_text = page.extract_text()
                if page_text and page_text.strip():
                    pages_text.append(page_text.strip())

        except Exception as e:
            raise ExtractionFailed(f"invalid PDF ({e})") from e

        text = '\n\n'.join(pages_text)

        if not text.strip():
            self.logger.warning(
                "No text extracted from PDF. "
                "The PDF may be scanned images or have text extraction disabled."
            )

        self.logger.debug(f"Extracted PDF text ({len(pages_text)} pages with text, {len(text)} chars)")
        return text

    def _extract_docx(self, content: bytes) -> str:
        """Extract raw paragraph text from a Word document."""
        try:
            doc = Document(io.BytesIO(content))

            paragraphs = []
            for para in doc.paragraphs:
                if para.text.strip():
                    paragraphs.append(para.text.strip())

            # Also extract from tables (common in resumes)
            for table in doc.tables:
                for row in table.rows:
                    row_texts = []
                    for cell in row.cells:
                        cell_text = cell.text.strip()
                        if cell_text:
                            row_texts.append(cell_text)
                    if row_texts:
                        paragraphs.append(' '.join(row_texts))

        except Exception as e:
            raise ExtractionFailed(f"invalid DOCX ({e})") from e

        text = '\n\n'.join(paragraphs)

        if not text.strip():
            self.logger.warning("Empty or minimal content in DOCX")

        self.logger.debug(f"Extracted DOCX text ({len(text)} chars)")
        return text

    def is_supported(self, media_type: Optional[str]) -> bool:
        return normalize_media_type(media_type) in self.SUPPORTED_MEDIA_TYPES

    @classmethod
    def get_supported_media_types(cls) -> list[str]:
        return sorted(cls.SUPPORTED_MEDIA_TYPES)
