"""
PDF Extractors Package
"""
from .base_extractor import (
    BasePDFExtractor,
    PDFText,
    Table
)
from .pdfplumber_extractor import PDFPlumberExtractor

__all__ = [
    'BasePDFExtractor',
    'PDFText',
    'Table',
    'PDFPlumberExtractor'
]
