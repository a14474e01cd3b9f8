# app/db/crud.py

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from .models import MerchantSummaryRow


def get_summary_content(db: Session, doc_key: str) -> Optional[Dict[str, Any]]:
    row = db.get(MerchantSummaryRow, doc_key)
    if row is None:
        return None
    return row.content
