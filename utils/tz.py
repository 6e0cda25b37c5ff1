# utils/tz.py
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from utils.constants import TR_TZ_OFFSET  # +3

def now_tr() -> datetime:
    """Türkiye saati (UTC+3, sabit ofset, naive)."""
    return datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(hours=TR_TZ_OFFSET)

def fmt_tr(dt: datetime, with_time: bool = True) -> str:
    if not isinstance(dt, datetime):
        return str(dt)
    return dt.strftime("%Y-%m-%d %H:%M") if with_time else dt.strftime("%Y-%m-%d")

def now_tr_str() -> str:
    return fmt_tr(now_tr(), with_time=True)
