from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class MerchantSummaryRequest(BaseModel):
    mid: Optional[List[str]] = None


class SummaryDocument(BaseModel):
    """
    Precomputed per-merchant summary as written to the document store.

    Validation is strict: "100", 100.0 or true in a numeric field is a
    decode failure, not a coerced value.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True)

    merchant_id: str = ""
    summary_date: str = ""
    amount: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    count: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    last_transaction_date: str = Field(default="", alias="last_trx_date")


class ErrorSchema(BaseModel):
    error_code: str
    error_message: Dict[str, str]  # {"indonesian": ..., "english": ...}


class OutputSchema(BaseModel):
    merchant_ids: Optional[List[str]] = None
    current_date: str = ""

    # amounts are serialized as decimal strings
    today_total_amount: str = ""
    weekly_total_amount: str = ""
    monthly_total_amount: str = ""


class MerchantSummaryResponse(BaseModel):
    error_schema: ErrorSchema
    output_schema: OutputSchema = Field(default_factory=OutputSchema)


class HealthResponse(BaseModel):
    status: str
    time: str
