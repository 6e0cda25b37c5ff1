# services/queries.py
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import asdict
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from dataio.loaders import Row, fetch_all, read_source
from services.models import (
    Business,
    DangerRankingData,
    FireCauseData,
    MonthlyFireData,
    TreeTypeData,
    VehicleData,
    VehicleType,
    YearlyFireData,
)
from utils.constants import (
    DEFAULT_VEHICLE_TYPE,
    DEFAULT_YEAR,
    MONTH_LABELS,
    SRC_BUSINESS,
    SRC_BUSINESS_VEHICLES,
    SRC_DANGER_RANKING,
    SRC_FIRE_CAUSES,
    SRC_TREE_TYPES,
    SRC_VEHICLE_EXCESS,
    UNKNOWN_LABEL,
    YEAR_TABLES,
)
from utils.normalize import (
    danger_score,
    match_month,
    resolve_danger_level,
    resolve_district_id,
    short_business_name,
    to_int,
)

LOG = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# İndeks yardımcıları
# -----------------------------------------------------------------------------
def index_first(rows: Iterable[Row], key: str, *, source: str = "") -> Dict[object, Row]:
    """
    key → ilk satır. Aynı anahtarın sonraki satırları yok sayılır (ilk eşleşme kazanır),
    tekrarlar WARNING olarak loglanır.
    """
    out: Dict[object, Row] = {}
    dups = 0
    for row in rows:
        k = row.get(key)
        if k in out:
            dups += 1
            continue
        out[k] = row
    if dups:
        LOG.warning("%s: '%s' için %d tekrar satır yok sayıldı (ilk eşleşme kullanıldı)", source or "?", key, dups)
    return out


def group_by(rows: Iterable[Row], key: str) -> Dict[str, List[Row]]:
    """str(key) → satırlar (geliş sırası korunur)."""
    out: Dict[str, List[Row]] = defaultdict(list)
    for row in rows:
        out[str(row.get(key))].append(row)
    return out


def _filter_business_id(rows: List[Row], business_id: Optional[str]) -> List[Row]:
    if not business_id:
        return rows
    return [r for r in rows if str(r.get("isletme_id")) == str(business_id)]


def _filter_business_name(rows: List[Row], business_name: Optional[str]) -> List[Row]:
    if not business_name:
        return rows
    return [r for r in rows if r.get("isletme_ad") == business_name]


def _vehicle_type_name(row: Row) -> str:
    arac = row.get("Arac") or row.get("arac") or {}
    if isinstance(arac, list):
        arac = arac[0] if arac else {}
    return arac.get("arac_tur_adi") or DEFAULT_VEHICLE_TYPE

# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def fetch_businesses(client) -> List[Business]:
    """
    Dört kaynak eşzamanlı okunur ve işletme adına (araç aşımı, tehlike) /
    işletme id'sine (araç türleri) göre birleştirilir.
    Sonuç sırası Isletme tablosunun sırasıdır.
    """
    res = fetch_all(client, {
        "businesses": (SRC_BUSINESS, "isletme_id, isletme_ad"),
        "vehicles":   (SRC_VEHICLE_EXCESS, "*"),
        "danger":     (SRC_DANGER_RANKING, "*"),
        "types":      (SRC_BUSINESS_VEHICLES, "isletme_id, adet, Arac(arac_tur_adi)"),
    })

    vehicle_idx = index_first(res["vehicles"], "isletme_ad", source=SRC_VEHICLE_EXCESS)
    danger_idx = index_first(res["danger"], "isletme_ad", source=SRC_DANGER_RANKING)
    types_by_id = group_by(res["types"], "isletme_id")

    out: List[Business] = []
    for row in res["businesses"]:
        bid = str(row.get("isletme_id"))
        name = row.get("isletme_ad") or f"İşletme {row.get('isletme_id')}"
        vinfo = vehicle_idx.get(name) or {}
        dinfo = danger_idx.get(name) or {}
        out.append(Business(
            id=bid,
            name=name,
            district_id=resolve_district_id(name) or bid,
            total_vehicles=to_int(vinfo.get("isletme_toplam_arac")),
            used_in_fire_vehicles=to_int(vinfo.get("yanginda_kullanilan_arac")),
            danger_level=resolve_danger_level(dinfo.get("tehlike_turu")),
            vehicle_types=tuple(
                VehicleType(type=_vehicle_type_name(a), count=to_int(a.get("adet")))
                for a in types_by_id.get(bid, [])
            ),
        ))
    LOG.info("işletme listesi: %d kayıt", len(out))
    return out


def fetch_vehicle_data(client) -> List[VehicleData]:
    rows = read_source(client, SRC_VEHICLE_EXCESS)
    return [
        VehicleData(
            business_name=short_business_name(r.get("isletme_ad")),
            total_vehicles=to_int(r.get("isletme_toplam_arac")),
            used_vehicles=to_int(r.get("yanginda_kullanilan_arac")),
            excess=to_int(r.get("arac_asimi")),
        )
        for r in rows
    ]


def fetch_danger_ranking(client) -> List[DangerRankingData]:
    """Skora göre azalan; eşit skorlar kaynak sırasını korur (sorted kararlıdır)."""
    rows = read_source(client, SRC_DANGER_RANKING)
    ranked = []
    for r in rows:
        level = resolve_danger_level(r.get("tehlike_turu"))
        ranked.append(DangerRankingData(
            business_name=short_business_name(r.get("isletme_ad")),
            danger_score=danger_score(level),
            level=level,
        ))
    return sorted(ranked, key=lambda d: d.danger_score, reverse=True)


def count_by_month(rows: Iterable[Row]) -> List[MonthlyFireData]:
    counts = [0] * len(MONTH_LABELS)
    for r in rows:
        idx = match_month(r.get("yangin_ay"))
        if idx is not None:
            counts[idx] += 1
    return [MonthlyFireData(month=label, count=c) for label, c in zip(MONTH_LABELS, counts)]


def fetch_monthly_fire_data(
    client, business_id: Optional[str] = None, year: int = DEFAULT_YEAR
) -> List[MonthlyFireData]:
    """Desteklenmeyen yıl → 12 ay sıfır, backend'e gidilmez."""
    table = YEAR_TABLES.get(year)
    if not table:
        return [MonthlyFireData(month=label, count=0) for label in MONTH_LABELS]
    rows = read_source(client, table, "yangin_ay, isletme_id")
    return count_by_month(_filter_business_id(rows, business_id))


def fetch_yearly_fire_data(client, business_id: Optional[str] = None) -> List[YearlyFireData]:
    res = fetch_all(client, {year: (table, "isletme_id") for year, table in YEAR_TABLES.items()})
    out = [
        YearlyFireData(year=int(year), count=len(_filter_business_id(rows, business_id)))
        for year, rows in res.items()
    ]
    return sorted(out, key=lambda y: y.year)


def fetch_tree_type_data(client, business_name: Optional[str] = None) -> List[TreeTypeData]:
    rows = _filter_business_name(read_source(client, SRC_TREE_TYPES), business_name)
    return [
        TreeTypeData(tree_type=r.get("agac_tur") or UNKNOWN_LABEL, count=to_int(r.get("yangin_sayisi")))
        for r in rows
    ]


def fetch_fire_cause_data(client, business_name: Optional[str] = None) -> List[FireCauseData]:
    rows = _filter_business_name(read_source(client, SRC_FIRE_CAUSES), business_name)
    return [
        FireCauseData(cause=r.get("yangin_neden") or UNKNOWN_LABEL, count=to_int(r.get("yangin_sayisi")))
        for r in rows
    ]


def records_frame(records: Sequence, columns: Optional[List[str]] = None) -> pd.DataFrame:
    """Kayıt listesi → DataFrame (grafik/CSV için). Boş listede kolonlar korunur."""
    if not records:
        return pd.DataFrame(columns=columns or [])
    df = pd.DataFrame([asdict(r) for r in records])
    return df[columns] if columns else df
