from datetime import datetime

from fastapi import APIRouter, Depends, Request

from db.store import DocumentStore
from schemas.summary import HealthResponse, MerchantSummaryRequest, MerchantSummaryResponse
from services.summary_service import build_merchant_summary


router = APIRouter()


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def get_current_datetime() -> datetime:
    return datetime.now().astimezone()


@router.get("/health", response_model=HealthResponse)
def health(now: datetime = Depends(get_current_datetime)):
    return HealthResponse(status="healthy", time=now.isoformat(timespec="seconds"))


@router.post("/api/merchant/summary", response_model=MerchantSummaryResponse)
def merchant_summary(
    payload: MerchantSummaryRequest,
    store: DocumentStore = Depends(get_document_store),
    now: datetime = Depends(get_current_datetime),
):
    # `now` is captured once so all three windows share the same reference date
    return build_merchant_summary(store=store, merchant_ids=payload.mid, now=now)
