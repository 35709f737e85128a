"""RPMScope DB 모델 — 라이브 RPM 단가 + 미분류 니치 검토 큐. (SQLite/PostgreSQL 호환)"""

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


# ─────────────────────────────────────────────
# 1. 카테고리별 라이브 RPM 단가 (DatabaseRateSource가 읽음)
# ─────────────────────────────────────────────
class NicheRpmRate(Base):
    __tablename__ = "niche_rpm_rates"

    id = Column(Integer, primary_key=True)
    niche = Column(String(50), nullable=False, unique=True)  # 카테고리 ID
    display_name = Column(String(100))
    min_rpm_usd = Column(Float, nullable=False)
    max_rpm_usd = Column(Float, nullable=False)
    average_rpm_usd = Column(Float, nullable=False)
    shorts_rpm_usd = Column(Float, default=0.15)
    confidence = Column(String(10), default="medium")  # high / medium / low
    data_source = Column(Text)
    sample_size = Column(Integer, default=0)
    notes = Column(Text)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)


# ─────────────────────────────────────────────
# 2. 미분류 니치 검토 큐
# ─────────────────────────────────────────────
class UnknownNiche(Base):
    __tablename__ = "unknown_niches"

    id = Column(Integer, primary_key=True)
    normalized_query = Column(String(200), nullable=False, unique=True)
    raw_query = Column(String(500), nullable=False)
    hit_count = Column(Integer, default=1, nullable=False)
    first_seen_at = Column(DateTime, default=_utcnow)
    last_seen_at = Column(DateTime, default=_utcnow)
    reviewed = Column(Boolean, default=False, nullable=False)

    __table_args__ = (
        Index("ix_unknown_niches_reviewed_hits", "reviewed", "hit_count"),
    )
