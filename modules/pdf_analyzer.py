"""Page-count discovery for uploaded documents."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Dict, Any, Union

from pypdf import PdfReader

from logging_config import get_logger


logger = get_logger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class PDFAnalyzer:
    """Extract the page count, resilient to malformed PDFs."""

    def analyze(self, source: Union[str, Path, bytes], content_type: str = PDF_CONTENT_TYPE) -> Dict[str, Any]:
        """
        Analyze a document given as a path or raw bytes.

        Word documents and unreadable PDFs report 0 pages; the order form
        then only accepts ``all`` or custom print.
        """
        info: Dict[str, Any] = {"pages": 0, "page_dimensions": []}

        if content_type != PDF_CONTENT_TYPE:
            return info

        stream = BytesIO(source) if isinstance(source, bytes) else str(source)
        try:
            reader = PdfReader(stream)
            info["pages"] = len(reader.pages)
            if reader.pages:
                page = reader.pages[0]
                width = round(float(page.mediabox.width) / 72, 2)
                height = round(float(page.mediabox.height) / 72, 2)
                info["page_dimensions"].append({"width_in": width, "height_in": height})
        except Exception as exc:
            logger.warning(f"PDF analysis failed: {exc}")
            info["error"] = f"PDF analysis failed: {exc}"

        return info
