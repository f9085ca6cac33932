"""
Solar Production Report Extractor API
FastAPI application for extracting monthly Energy to Grid values from solar production PDFs
"""
from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import os
import uuid
import logging

from models import (
    ExtractionResponse,
    ForecastPeriodsRequest,
    ForecastPeriodsResponse,
    HealthResponse,
    TextExtractionRequest,
)
from services.extractors import PDFPlumberExtractor
from services.forecast_periods import build_forecast_periods
from services.solar_report_extractor import SolarReportExtractor
import aiofiles

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Initialize FastAPI app
app = FastAPI(
    title="Solar Production Report Extractor",
    description="API for extracting monthly grid-delivered energy and annual totals from solar production reports",
    version=VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services
pdf_extractor = PDFPlumberExtractor()
report_extractor = SolarReportExtractor()

# Ensure uploads directory exists
UPLOAD_DIR = os.path.join(os.path.dirname(__file__), "uploads")
os.makedirs(UPLOAD_DIR, exist_ok=True)


def _extract_response(text, tables=None, filename=None) -> ExtractionResponse:
    """Run extraction plus the validation gate and wrap the outcome"""
    result = report_extractor.extract(text, tables)
    scorer = report_extractor.scorer

    if scorer.should_reject(result):
        reason = scorer.get_rejection_reason(result)
        logger.warning(f"Extraction rejected ({result.extraction_confidence}%): {reason}")
        return ExtractionResponse(
            success=False,
            message=f"Solar data extraction failed: {reason}",
            data=result,
            confidence=result.extraction_confidence,
            filename=filename
        )

    return ExtractionResponse(
        success=True,
        message=f"Extraction completed successfully with confidence {result.extraction_confidence}%",
        data=result,
        confidence=result.extraction_confidence,
        filename=filename
    )


@app.get("/", response_model=HealthResponse)
async def root():
    """Root endpoint - health check"""
    return HealthResponse(status="healthy", version=VERSION)


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(status="healthy", version=VERSION)


@app.post("/api/extract/text", response_model=ExtractionResponse)
async def extract_from_text(request: TextExtractionRequest):
    """
    Extract monthly values from already converted report text

    Args:
        request: Text (and optional tables JSON) from a PDF-to-text converter

    Returns:
        ExtractionResponse; success is False when the result is rejected
    """
    return _extract_response(request.text, request.tables)


@app.post("/api/extract", response_model=ExtractionResponse)
async def extract_from_pdf(file: UploadFile = File(...)):
    """
    Extract monthly values from a solar production PDF

    Args:
        file: PDF file to process

    Returns:
        ExtractionResponse with the scored result
    """
    if not file.filename.lower().endswith('.pdf'):
        raise HTTPException(
            status_code=400,
            detail="Only PDF files are supported"
        )

    # Generate unique filename
    temp_path = os.path.join(UPLOAD_DIR, f"{uuid.uuid4()}.pdf")

    try:
        async with aiofiles.open(temp_path, 'wb') as f:
            await f.write(await file.read())

        logger.info(f"Processing file: {file.filename}")

        converted = pdf_extractor.extract(temp_path)
        return _extract_response(converted.text, converted.tables_json, file.filename)

    except ValueError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logger.error(f"Error processing file: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Error processing file: {str(e)}"
        )

    finally:
        # Clean up temp file
        if os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError as e:
                logger.warning(f"Failed to remove temp file: {e}")


@app.post("/api/forecast/periods", response_model=ForecastPeriodsResponse)
async def forecast_periods(request: ForecastPeriodsRequest):
    """
    Map an accepted extraction result to monthly period records

    Args:
        request: Extraction result and optional display year

    Returns:
        ForecastPeriodsResponse with one period per extracted month
    """
    periods = build_forecast_periods(request.result, request.year)
    return ForecastPeriodsResponse(
        success=True,
        message=f"Built {len(periods)} monthly periods",
        periods=periods
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
