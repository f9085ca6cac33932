"""
PDFPlumber-based PDF-to-text conversion
"""
import pdfplumber
from collections import defaultdict
from typing import List
import logging

from .base_extractor import BasePDFExtractor, PDFText, Table

logger = logging.getLogger(__name__)


class PDFPlumberExtractor(BasePDFExtractor):
    """
    PDF extractor using pdfplumber library
    Rebuilds text line by line so each production table row stays on one line
    """

    def __init__(self, y_tolerance: int = 3):
        """
        Initialize pdfplumber extractor

        Args:
            y_tolerance: Y-coordinate tolerance for grouping words on same line
        """
        self.y_tolerance = y_tolerance

    @property
    def name(self) -> str:
        return "pdfplumber"

    def extract(self, filepath: str) -> PDFText:
        """Convert every page of the PDF"""
        self.validate_file(filepath)

        pages_text = []
        all_tables = []

        try:
            with pdfplumber.open(filepath) as pdf:
                for page in pdf.pages:
                    pages_text.append(self.extract_text(page))
                    all_tables.extend(self.extract_tables(page))

            logger.info(f"PDFPlumber extracted {len(pages_text)} pages, {len(all_tables)} tables")

            return PDFText(
                text='\n'.join(pages_text),
                pages=pages_text,
                tables=all_tables,
                metadata={
                    "y_tolerance": self.y_tolerance,
                    "num_pages": len(pages_text)
                },
                extractor_name=self.name
            )

        except Exception as e:
            logger.error(f"PDFPlumber extraction failed: {e}")
            raise

    def extract_text(self, page) -> str:
        """
        Extract text from page using y-tolerance word grouping
        """
        words = page.extract_words(keep_blank_chars=True)
        if not words:
            return ""

        # Group words by approximate y-coordinate
        lines_by_y = defaultdict(list)
        for w in words:
            y_key = round(w['top'] / self.y_tolerance) * self.y_tolerance
            lines_by_y[y_key].append(w)

        # Lines sorted by y, words sorted by x within each line
        text_lines = []
        for y in sorted(lines_by_y.keys()):
            line_words = sorted(lines_by_y[y], key=lambda w: w['x0'])
            text_lines.append(' '.join(w['text'] for w in line_words))

        return '\n'.join(text_lines)

    def extract_tables(self, page) -> List[Table]:
        """Extract raw tables from page"""
        return [
            Table(cells=raw_table, page_number=page.page_number)
            for raw_table in (page.extract_tables() or [])
            if raw_table
        ]
