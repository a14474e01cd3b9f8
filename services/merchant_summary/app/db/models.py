from sqlalchemy import Column, String, DateTime, JSON
from datetime import datetime, timezone
from db.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class MerchantSummaryRow(Base):
    __tablename__ = "merchant_summaries"

    # e.g. M001_daily_2024-05-01, M001_weekly_2024-04-29_2024-05-03
    doc_key = Column(String, primary_key=True)
    content = Column(JSON, nullable=False)

    updated_at = Column(DateTime, default=_utcnow)
