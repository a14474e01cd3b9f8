from typing import List

from schemas.summary import ErrorSchema, MerchantSummaryResponse, OutputSchema

SUCCESS_CODE = "D000"


def success_response(
    merchant_ids: List[str],
    current_date: str,
    today_total: int,
    weekly_total: int,
    monthly_total: int,
) -> MerchantSummaryResponse:
    return MerchantSummaryResponse(
        error_schema=ErrorSchema(
            error_code=SUCCESS_CODE,
            error_message={"indonesian": "Berhasil", "english": "Success"},
        ),
        output_schema=OutputSchema(
            merchant_ids=merchant_ids,
            current_date=current_date,
            today_total_amount=str(today_total),
            weekly_total_amount=str(weekly_total),
            monthly_total_amount=str(monthly_total),
        ),
    )


def error_response(error_code: str, message: str) -> MerchantSummaryResponse:
    # both language slots carry the same text for error codes
    return MerchantSummaryResponse(
        error_schema=ErrorSchema(
            error_code=error_code,
            error_message={"indonesian": message, "english": message},
        ),
    )
