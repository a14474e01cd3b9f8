import logging
from datetime import datetime
from typing import Callable, List

from pydantic import ValidationError

from core.errors import WINDOW_ERROR_CODES, AggregationError, SummaryError
from db.store import DocumentNotFound, DocumentStore, DocumentStoreError
from schemas.summary import MerchantSummaryResponse, SummaryDocument
from services.key_deriver import daily_key, monthly_key, weekly_key
from services.response_formatter import success_response

logger = logging.getLogger(__name__)

# window name -> key function, in the order windows are computed
WINDOWS = (
    ("daily", daily_key),
    ("weekly", weekly_key),
    ("monthly", monthly_key),
)


def aggregate_window(
    store: DocumentStore,
    window: str,
    merchant_ids: List[str],
    key_for: Callable[[str], str],
) -> int:
    """
    Sums `amount` over the merchants whose summary document exists.

    - missing documents contribute 0
    - any other store or decode failure aborts the whole window
    """
    total = 0

    for mid in merchant_ids:
        doc_key = key_for(mid)

        try:
            content = store.get(doc_key)
        except DocumentNotFound:
            logger.warning("⚠️ %s summary not found for %s", window.capitalize(), doc_key)
            continue
        except DocumentStoreError as e:
            raise AggregationError(window, doc_key, str(e)) from e

        try:
            summary = SummaryDocument.model_validate(content)
        except ValidationError as e:
            raise AggregationError(window, doc_key, f"failed to decode document: {e}") from e

        total += summary.amount
        logger.info("📈 %s %s: %d", window.capitalize(), mid, summary.amount)

    return total


def build_merchant_summary(
    store: DocumentStore,
    merchant_ids: List[str] | None,
    now: datetime,
) -> MerchantSummaryResponse:
    if not merchant_ids:
        raise SummaryError("E002")

    logger.info("📊 Processing summary for %d merchants", len(merchant_ids))

    totals = {}
    for window, key_fn in WINDOWS:
        try:
            totals[window] = aggregate_window(
                store, window, merchant_ids, lambda mid, key_fn=key_fn: key_fn(mid, now)
            )
        except AggregationError:
            logger.exception("❌ Error calculating %s total", window)
            raise SummaryError(WINDOW_ERROR_CODES[window])

    logger.info(
        "✅ Summary calculated - Today: %d, Weekly: %d, Monthly: %d",
        totals["daily"], totals["weekly"], totals["monthly"],
    )

    return success_response(
        merchant_ids=merchant_ids,
        current_date=now.date().isoformat(),
        today_total=totals["daily"],
        weekly_total=totals["weekly"],
        monthly_total=totals["monthly"],
    )
