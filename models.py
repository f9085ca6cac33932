"""
Pydantic models for the Solar Production Report Extractor API
"""
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from types import MappingProxyType
from typing import Optional, Dict, Any, List, Literal, Mapping, Tuple
from datetime import datetime

# 0 is reserved for reports without any text body
ConfidenceTier = Literal[100, 98, 95, 90, 85, 80, 60, 30, 0]


class ExtractionResult(BaseModel):
    """Monthly grid-delivered values and annual total extracted from one report"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total_energy_to_grid: Optional[float] = Field(None, description="Annual Energy to Grid total (kWh)")
    monthly_values: Mapping[str, float] = Field(
        default_factory=dict,
        description="Lowercase month name -> grid-delivered kWh, only for extracted months"
    )
    extraction_confidence: ConfidenceTier = Field(0, description="Confidence tier 0-100")
    has_valid_monthly_data: bool = Field(False, description="True if at least one month was extracted")
    errors: Tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("monthly_values", mode="after")
    @classmethod
    def _read_only_positive(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        for month, kwh in value.items():
            if kwh <= 0:
                raise ValueError(f"Monthly value for {month} must be positive, got {kwh}")
        return MappingProxyType(dict(value))

    @field_serializer("monthly_values")
    def _dump_monthly_values(self, value: Mapping[str, float]) -> Dict[str, float]:
        return dict(value)

    @property
    def months_found(self) -> int:
        return len(self.monthly_values)


class ForecastPeriod(BaseModel):
    """One monthly period record ready for persistence"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    year: str = Field(pattern=r"^\d{4}$", description="Display year, 4 digits")
    month: str = Field(pattern=r"^(0[1-9]|1[0-2])$", description="Month number 01-12")
    kwh_value: float = Field(ge=0, description="Grid-delivered kWh for the month")


class TextExtractionRequest(BaseModel):
    """Text (and optional tables JSON) produced by a PDF-to-text converter"""
    text: Optional[str] = Field(None, description="Full document text, newline-delimited")
    tables: Optional[Any] = Field(None, description="Tabular JSON from the converter (unused)")


class ForecastPeriodsRequest(BaseModel):
    """Accepted extraction result to map into monthly periods"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: ExtractionResult
    year: Optional[str] = Field(None, pattern=r"^\d{4}$")


class ExtractionResponse(BaseModel):
    """API response for extraction endpoints"""
    success: bool
    message: str
    data: Optional[ExtractionResult] = None
    confidence: Optional[int] = None
    filename: Optional[str] = None


class ForecastPeriodsResponse(BaseModel):
    """API response for period mapping"""
    success: bool
    message: str
    periods: List[ForecastPeriod] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """API health check response"""
    status: str
    version: str
    timestamp: datetime = Field(default_factory=datetime.now)
