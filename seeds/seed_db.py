"""DB 테이블 생성 + 라이브 RPM 단가 시드 적재 스크립트."""

import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select

from database import async_session, init_db
from database.models import NicheRpmRate
from processor.rate_table import CATEGORY_RATES, SHORT_FORM_RPM_USD

# (niche, min, max, average, confidence, data_source, sample_size)
LIVE_RPM_SEED = [
    ("finance", 15.0, 30.0, 22.5, "high", "Tubular Labs 2024, Creator earnings reports", 250),
    ("business", 15.0, 25.0, 20.0, "high", "Creator earnings reports, Social Blade estimates", 180),
    ("tech", 8.0, 25.0, 16.5, "high", "Creator earnings reports, agency rate cards", 220),
    ("education", 5.0, 15.0, 9.89, "medium", "Creator earnings reports", 140),
    ("health", 4.0, 12.0, 8.0, "medium", "Creator earnings reports, agency rate cards", 120),
    ("lifestyle", 2.0, 6.0, 3.47, "medium", "Creator earnings reports", 160),
    ("gaming", 2.0, 6.0, 4.0, "high", "Creator earnings reports, Social Blade estimates", 300),
    ("food", 2.0, 8.0, 5.0, "medium", "Creator earnings reports", 90),
    ("travel", 3.0, 10.0, 6.5, "medium", "Creator earnings reports", 80),
    ("entertainment", 1.5, 5.0, 3.0, "medium", "Creator earnings reports", 200),
    ("automotive", 4.0, 15.0, 9.5, "medium", "Creator earnings reports, agency rate cards", 70),
]


def build_rows() -> list[NicheRpmRate]:
    rows = []
    for niche, min_rpm, max_rpm, avg_rpm, confidence, source, sample_size in LIVE_RPM_SEED:
        rows.append(NicheRpmRate(
            niche=niche,
            display_name=CATEGORY_RATES[niche].display_name,
            min_rpm_usd=min_rpm,
            max_rpm_usd=max_rpm,
            average_rpm_usd=avg_rpm,
            shorts_rpm_usd=SHORT_FORM_RPM_USD,
            confidence=confidence,
            data_source=source,
            sample_size=sample_size,
        ))
    return rows


async def seed(session_factory=None, bind=None) -> int:
    # 1) 테이블 생성
    print("[1/2] 테이블 생성 중...")
    await init_db(bind)

    session_factory = session_factory or async_session
    async with session_factory() as session:
        # 이미 데이터가 있으면 스킵
        existing = await session.execute(select(NicheRpmRate).limit(1))
        if existing.scalar_one_or_none():
            print("[SKIP] 시드 데이터가 이미 존재합니다.")
            return 0

        # 2) 라이브 단가 시드
        print("[2/2] 카테고리별 RPM 단가 적재 중...")
        rows = build_rows()
        session.add_all(rows)
        await session.commit()

    print(f"\n=== 시드 데이터 적재 완료: {len(rows)}개 카테고리 ===")
    return len(rows)


if __name__ == "__main__":
    asyncio.run(seed())
