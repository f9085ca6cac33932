"""
Base classes and interfaces for PDF-to-text conversion
The extraction engine only consumes the text; tables are passed along untouched
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
import os


@dataclass
class Table:
    """Raw table cells found on one page"""
    cells: List[List[Optional[str]]]  # 2D array of cell values
    page_number: int

    @property
    def num_rows(self) -> int:
        return len(self.cells)


@dataclass
class PDFText:
    """
    Converted PDF: full text plus per-page text and tables
    """
    text: str
    pages: List[str]
    tables: List[Table] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    extractor_name: str = "unknown"

    @property
    def num_pages(self) -> int:
        return len(self.pages)

    @property
    def tables_json(self) -> List[Dict[str, Any]]:
        """Tables in the JSON shape handed to the extraction service"""
        return [{"page": t.page_number, "rows": t.cells} for t in self.tables]


class BasePDFExtractor(ABC):
    """
    Abstract base class for PDF conversion engines
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this extractor"""
        pass

    @abstractmethod
    def extract(self, filepath: str) -> PDFText:
        """
        Convert a PDF file to text

        Args:
            filepath: Path to the PDF file

        Returns:
            PDFText with the full newline-delimited text
        """
        pass

    @abstractmethod
    def extract_text(self, page) -> str:
        """
        Extract text from a single page

        Args:
            page: Page object (type depends on extractor implementation)

        Returns:
            Extracted text as string
        """
        pass

    def validate_file(self, filepath: str) -> bool:
        """
        Validate that the file exists and can be processed

        Returns:
            True if valid, raises exception otherwise
        """
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")

        if not filepath.lower().endswith('.pdf'):
            raise ValueError(f"File must be a PDF: {filepath}")

        return True
