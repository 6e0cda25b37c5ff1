# utils/constants.py
from types import MappingProxyType

# ── Zaman dilimi ─────────────────────────────────────────────────────────────
TR_TZ_OFFSET = 3  # Türkiye: UTC+3 (yaz/kış farkı yok)

# ── Backend kaynakları (tablo / view adları) ─────────────────────────────────
# Not: isimler Supabase şemasıyla birebir aynı olmalı; büyük/küçük harf önemli.
SRC_BUSINESS       = "Isletme"
SRC_VEHICLE_EXCESS = "isletme_arac_asimi_view"
SRC_DANGER_RANKING = "isletme_tehlike_siralama_view"
SRC_BUSINESS_VEHICLES = "Isletme_arac"
SRC_TREE_TYPES     = "tehlikeli_yangin_agac_view"
SRC_FIRE_CAUSES    = "isletme_yangin_nedenleri_view"

# Yıl → yangın tablosu (sabit üç bölüm)
YEAR_TABLES = MappingProxyType({
    2023: "Yangin_2023",
    2024: "Yangin_2024",
    2025: "Yangin_2025",
})
DEFAULT_YEAR = 2023

# ── Tehlike seviyeleri ───────────────────────────────────────────────────────
DANGER_LEVELS = ("low", "medium", "high", "critical")
DEFAULT_DANGER = "low"
DEFAULT_DANGER_LABEL = "Düşük"

# Serbest metin etiket → seviye (aksanlı ve ASCII yazımlar)
DANGER_LABELS = MappingProxyType({
    "Çok Yüksek": "critical",
    "Cok Yuksek": "critical",
    "Yüksek":     "high",
    "Yuksek":     "high",
    "Orta":       "medium",
    "Düşük":      "low",
    "Dusuk":      "low",
})

DANGER_SCORES = MappingProxyType({"low": 25, "medium": 50, "high": 75, "critical": 100})

# UI etiketleri (popup / lejant)
DANGER_LABELS_TR = MappingProxyType({
    "low":      "Düşük",
    "medium":   "Orta",
    "high":     "Yüksek",
    "critical": "Kritik",
})

# ── Aylar ────────────────────────────────────────────────────────────────────
MONTH_LABELS = ("Oca", "Şub", "Mar", "Nis", "May", "Haz", "Tem", "Ağu", "Eyl", "Eki", "Kas", "Ara")
MONTH_ALIASES = (
    frozenset({"ocak", "january"}),
    frozenset({"şubat", "subat", "february"}),
    frozenset({"mart", "march"}),
    frozenset({"nisan", "april"}),
    frozenset({"mayıs", "mayis", "may"}),
    frozenset({"haziran", "june"}),
    frozenset({"temmuz", "july"}),
    frozenset({"ağustos", "agustos", "august"}),
    frozenset({"eylül", "eylul", "september"}),
    frozenset({"ekim", "october"}),
    frozenset({"kasım", "kasim", "november"}),
    frozenset({"aralık", "aralik", "december"}),
)

# ── İşletme adı → ilçe id (elle tutulan eşleme) ──────────────────────────────
DISTRICT_MAP = MappingProxyType({
    "Bursa Merkez Orman İşletmesi":     "bursa-merkez",
    "Gemlik Orman İşletmesi":           "bursa-gemlik",
    "İnegöl Orman İşletmesi":           "bursa-inegol",
    "Inegol Orman İşletmesi":           "bursa-inegol",
    "İznik Orman İşletmesi":            "bursa-iznik",
    "Orhaneli Orman İşletmesi":         "bursa-orhaneli",
    "Mustafakemalpaşa Orman İşletmesi": "bursa-mkpasa",
    "Karacabey Orman İşletmesi":        "bursa-karacabey",
    "Keles Orman İşletmesi":            "bursa-keles",
    "Bilecik Merkez Orman İşletmesi":   "bilecik-merkez",
    "Bozüyük Orman İşletmesi":          "bilecik-bozuyuk",
    "Bozuyuk Orman İşletmesi":          "bilecik-bozuyuk",
    "Yalova Merkez Orman İşletmesi":    "yalova-merkez",
})

BUSINESS_SUFFIX = " Orman İşletmesi"

# ── Eksik veri varsayılanları ────────────────────────────────────────────────
UNKNOWN_LABEL = "Bilinmiyor"
DEFAULT_VEHICLE_TYPE = "Araç"
DEFAULT_BUSINESS_SHORT = "İşletme"

# ── Harita ───────────────────────────────────────────────────────────────────
REGION_CENTER = (40.2, 29.3)  # (lat, lon) Bursa çevresi
REGION_ZOOM = 9
SELECTED_ZOOM = 11

DANGER_COLORS = MappingProxyType({
    "low":      "#22c55e",
    "medium":   "#eab308",
    "high":     "#f97316",
    "critical": "#ef4444",
})
