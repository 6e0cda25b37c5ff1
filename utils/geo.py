# utils/geo.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from utils.constants import DEFAULT_DANGER, REGION_CENTER, REGION_ZOOM, SELECTED_ZOOM

# ── Sabit ilçe listesi (backend'den gelmez) ─────────────────────────────────
@dataclass(frozen=True)
class District:
    id: str
    name: str
    province: str
    lat_lng: Tuple[float, float]  # (lat, lon)


DISTRICTS: Tuple[District, ...] = (
    District("bursa-merkez",    "Bursa Merkez",     "Bursa",   (40.1885, 29.0610)),
    District("bursa-gemlik",    "Gemlik",           "Bursa",   (40.4317, 29.1565)),
    District("bursa-inegol",    "İnegöl",           "Bursa",   (40.0806, 29.5097)),
    District("bursa-iznik",     "İznik",            "Bursa",   (40.4292, 29.7194)),
    District("bursa-orhaneli",  "Orhaneli",         "Bursa",   (39.9036, 28.9883)),
    District("bursa-mkpasa",    "Mustafakemalpaşa", "Bursa",   (40.0394, 28.4111)),
    District("bursa-karacabey", "Karacabey",        "Bursa",   (40.2147, 28.3606)),
    District("bursa-keles",     "Keles",            "Bursa",   (39.9136, 29.2306)),
    District("bilecik-merkez",  "Bilecik Merkez",   "Bilecik", (40.1425, 29.9793)),
    District("bilecik-bozuyuk", "Bozüyük",          "Bilecik", (39.9078, 30.0367)),
    District("yalova-merkez",   "Yalova Merkez",    "Yalova",  (40.6550, 29.2769)),
)


def find_district(district_id: Optional[str], districts: Sequence[District] = DISTRICTS) -> Optional[District]:
    if not district_id:
        return None
    return next((d for d in districts if d.id == district_id), None)


def group_by_province(districts: Iterable[District] = DISTRICTS) -> Dict[str, List[District]]:
    """İl → ilçeler. İl sırası ilk görülüş sırası, il içi sıra ekleme sırası."""
    out: Dict[str, List[District]] = {}
    for d in districts:
        out.setdefault(d.province, []).append(d)
    return out


def business_for_district(district_id: str, businesses: Iterable) -> Optional[object]:
    """district_id'si eşleşen ilk işletme."""
    return next((b for b in businesses if b.district_id == district_id), None)


def district_danger(district_id: str, businesses: Iterable) -> str:
    b = business_for_district(district_id, businesses)
    return b.danger_level if b is not None else DEFAULT_DANGER


def nearest_district(lat: float, lon: float, districts: Sequence[District] = DISTRICTS) -> Optional[str]:
    """Verilen (lat,lon) için en yakın ilçe id."""
    if not districts:
        return None
    best = min(districts, key=lambda d: (d.lat_lng[0] - float(lat)) ** 2 + (d.lat_lng[1] - float(lon)) ** 2)
    return best.id


def _extract_latlon(obj) -> Tuple[float, float] | None:
    """st_folium dönüşündeki tıklama nesnesinden güvenli lat/lon çıkarma."""
    if obj is None:
        return None
    # 1) [lat, lon]
    if isinstance(obj, (list, tuple)) and len(obj) >= 2:
        return float(obj[0]), float(obj[1])
    if isinstance(obj, dict):
        # 2) {"lat":..., "lng":...} veya {"lat":..., "lon":...}
        if "lat" in obj and ("lng" in obj or "lon" in obj):
            return float(obj["lat"]), float(obj.get("lng", obj.get("lon")))
        # 3) {"latlng": {"lat":..., "lng":...}}
        ll = obj.get("latlng")
        if ll is not None:
            return _extract_latlon(ll)
    return None


def resolve_clicked_district(ret, districts: Sequence[District] = DISTRICTS) -> Optional[str]:
    """
    st_folium ret sözlüğünden tıklanan ilçe id'sini çıkart.
    Marker tıklaması last_object_clicked'e marker konumunu yazar; o konuma en yakın ilçe döner.
    """
    if not isinstance(ret, dict):
        return None
    latlon = _extract_latlon(ret.get("last_object_clicked"))
    if latlon is None:
        return None
    return nearest_district(latlon[0], latlon[1], districts)


def map_target(selected: Optional[str], districts: Sequence[District] = DISTRICTS) -> Tuple[Tuple[float, float], int]:
    """
    Harita merkezi ve zoom.
    - Seçim yok (ya da bilinmeyen id): bölge merkezi
    - Seçili ilçe: ilçenin koordinatı
    """
    d = find_district(selected, districts)
    if d is None:
        return REGION_CENTER, REGION_ZOOM
    return d.lat_lng, SELECTED_ZOOM
