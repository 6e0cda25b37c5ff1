# utils/normalize.py
from __future__ import annotations

from typing import Optional

from utils.constants import (
    BUSINESS_SUFFIX,
    DANGER_LABELS,
    DANGER_SCORES,
    DEFAULT_BUSINESS_SHORT,
    DEFAULT_DANGER,
    DEFAULT_DANGER_LABEL,
    DISTRICT_MAP,
    MONTH_ALIASES,
)

# Türkçe karakter → ASCII (büyük harfler küçük ASCII'ye iner)
# U+0307: "İ".lower() sonrası kalan birleşik nokta
_TR_FOLD = str.maketrans({
    "ç": "c", "Ç": "c",
    "ğ": "g", "Ğ": "g",
    "ı": "i", "İ": "i",
    "ö": "o", "Ö": "o",
    "ş": "s", "Ş": "s",
    "ü": "u", "Ü": "u",
    "\u0307": None,
})


def fold_turkish(text: str) -> str:
    return str(text).translate(_TR_FOLD)


def slugify_district(name: str) -> str:
    """
    'İnegöl Yeni Şube' → 'inegol-yeni-sube'. Tekrar uygulanınca değişmez.
    Baştaki/sondaki boşluk atılır, iç boşluk öbekleri tek tireye iner; yalnız boşluk → "".
    """
    return "-".join(fold_turkish(name).lower().split())


def resolve_district_id(name: Optional[str]) -> Optional[str]:
    """
    İşletme adı → ilçe id.
    Önce elle tutulan eşleme; yoksa ASCII slug. Boş/None ya da yalnız boşluk → None
    (çağıran taraf sayısal işletme id'sine düşmeli).
    """
    if not name:
        return None
    hit = DISTRICT_MAP.get(name)
    if hit:
        return hit
    return slugify_district(name) or None


def resolve_danger_level(label: Optional[str]) -> str:
    """Serbest metin tehlike türü → low/medium/high/critical. Bilinmeyen → low."""
    return DANGER_LABELS.get(label if label is not None else DEFAULT_DANGER_LABEL, DEFAULT_DANGER)


def danger_score(level: str) -> int:
    return DANGER_SCORES.get(level, DANGER_SCORES[DEFAULT_DANGER])


def match_month(value) -> Optional[int]:
    """Ay alanı (Ocak / ocak / january ...) → 0..11; eşleşmezse None."""
    if value is None:
        return None
    low = str(value).lower()
    for idx, aliases in enumerate(MONTH_ALIASES):
        if low in aliases:
            return idx
    return None


def short_business_name(name: Optional[str]) -> str:
    return (name or DEFAULT_BUSINESS_SHORT).replace(BUSINESS_SUFFIX, "")


def to_int(val) -> int:
    """None / sayı olmayan / sonsuz (Infinity, 1e400) → 0."""
    if val is None:
        return 0
    try:
        return int(float(val))
    except (TypeError, ValueError, OverflowError):
        return 0
