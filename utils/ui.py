# utils/ui.py
from __future__ import annotations
import html
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import folium
import streamlit as st

from utils.constants import DANGER_COLORS, DANGER_LABELS_TR, DANGER_LEVELS, DEFAULT_DANGER
from utils.geo import DISTRICTS, District, business_for_district, map_target

__all__ = [
    "SMALL_UI_CSS",
    "MARKER_CSS",
    "MarkerStyle",
    "marker_style",
    "marker_icon",
    "build_region_map",
    "legend_html",
    "render_kpi_row",
    "title_with_help",
    "header_with_help",
    "subheader_with_help",
]

# ────────────────────────────── KÜÇÜK VE TUTARLI TİPOGRAFİ ──────────────────────────────
SMALL_UI_CSS = """
<style>
html, body, [class*="css"] { font-size: 12px; line-height: 1.28; }
h1 { font-size: 1.9rem; line-height: 1.2; margin: .45rem 0 .35rem 0; }
h2 { font-size: .95rem;  margin: .25rem 0; }
h3 { font-size: .88rem;  margin: .18rem 0; }
section.main > div.block-container { padding-top: .55rem; padding-bottom: .10rem; }

/* === Butonlar (ilçe listesi) === */
.stButton > button { font-size: .78rem; padding: 3px 10px; border-radius: 8px; }

[data-testid="stMetricValue"] { font-size: .95rem; }
[data-testid="stMetricLabel"] { font-size: .68rem; color:#666; }

/* === Özel KPI kartı (tooltip destekli) === */
.kpi{display:flex;flex-direction:column;gap:2px}
.kpi-label{font-size:.68rem;color:#6b7280}
.kpi-value{font-size:.95rem;font-weight:600}

/* === Title/Subtitle yardım rozeti === */
.title-help{display:inline-flex;align-items:center;gap:6px}
.title-help .hint{
  display:inline-block;width:14px;height:14px;border-radius:50%;
  background:#e5e7eb;color:#111;text-align:center;line-height:14px;
  font-size:10px;font-weight:700;cursor:help;
}
.title-help .text{border-bottom:1px dotted #9ca3af}

/* === Lejant === */
.legend{display:flex;flex-wrap:wrap;gap:12px;font-size:.74rem;color:#6b7280}
.legend .dot{display:inline-block;width:12px;height:12px;border-radius:50%;margin-right:5px;vertical-align:middle}
</style>
"""

# Harita içine gömülen stil (kritik marker nabzı)
MARKER_CSS = """
<style>
@keyframes pulse { 0%, 100% { opacity: 1; } 50% { opacity: 0.6; } }
.custom-marker { background: transparent; border: none; }
</style>
"""

# ───────────────────────────── Başlık + mini açıklama yardımcıları ─────────────────────────────
def title_with_help(level: int, text: str, help_text: str | None = None):
    """level=1/2/3 → h1/h2/h3. Hover'da küçük açıklama için title attr."""
    tag = f"h{max(1, min(level, 3))}"
    if help_text:
        text_html = f'<span class="text" title="{help_text}">{text}</span>'
        hint_html = f'<span class="hint" title="{help_text}">i</span>'
    else:
        text_html = f'<span class="text">{text}</span>'
        hint_html = ""
    st.markdown(f'<{tag} class="title-help">{text_html}{hint_html}</{tag}>', unsafe_allow_html=True)

def header_with_help(text: str, help_text: str | None = None):
    title_with_help(2, text, help_text)

def subheader_with_help(text: str, help_text: str | None = None):
    title_with_help(3, text, help_text)

# ───────────────────────────── KPI satırı ─────────────────────────────
def render_kpi_row(items: list[tuple[str, str | float, str]]):
    """items = [(label, value, tooltip), ...]. Tooltip tarayıcı 'title' ile gösterilir."""
    cols = st.columns(len(items))
    for col, (label, value, tip) in zip(cols, items):
        col.markdown(
            f"""<div class="kpi" title="{tip}">
                   <div class="kpi-label">{label}</div>
                   <div class="kpi-value">{value}</div>
                </div>""",
            unsafe_allow_html=True,
        )

# ───────────────────────────── MARKER GÖRÜNÜMÜ ─────────────────────────────
@dataclass(frozen=True)
class MarkerStyle:
    color: str
    size: int
    border_width: int
    pulse: bool
    glow: bool


def marker_style(level: str, selected: bool) -> MarkerStyle:
    """(tehlike seviyesi, seçili mi) → görünüm. Saf fonksiyon."""
    color = DANGER_COLORS.get(level, DANGER_COLORS[DEFAULT_DANGER])
    return MarkerStyle(
        color=color,
        size=40 if selected else 30,
        border_width=4 if selected else 2,
        pulse=(level == "critical"),
        glow=selected,
    )


def marker_icon_html(style: MarkerStyle) -> str:
    s = style.size
    extra = ""
    if style.pulse:
        extra += "animation: pulse 2s infinite;"
    if style.glow:
        extra += f"transform: scale(1.2); box-shadow: 0 0 15px {style.color};"
    return (
        f'<div style="width:{s}px;height:{s}px;background-color:{style.color};'
        f'border:{style.border_width}px solid white;border-radius:50%;'
        f'box-shadow:0 2px 8px rgba(0,0,0,0.3);display:flex;align-items:center;justify-content:center;{extra}">'
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{s * 0.5}" height="{s * 0.5}" viewBox="0 0 24 24" '
        f'fill="none" stroke="white" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
        f'<path d="M20 10c0 6-8 12-8 12s-8-6-8-12a8 8 0 0 1 16 0Z"/><circle cx="12" cy="10" r="3"/></svg>'
        f'</div>'
    )


def marker_icon(level: str, selected: bool) -> folium.DivIcon:
    style = marker_style(level, selected)
    return folium.DivIcon(
        html=marker_icon_html(style),
        icon_size=(style.size, style.size),
        icon_anchor=(style.size // 2, style.size // 2),
        class_name="custom-marker",
    )


def _popup_html(district: District, business) -> str:
    parts = [
        f"<b>{html.escape(district.name)}</b>",
        f"<span style='color:#6b7280'>{html.escape(district.province)}</span>",
    ]
    if business is not None:
        label = DANGER_LABELS_TR.get(business.danger_level, DANGER_LABELS_TR[DEFAULT_DANGER])
        parts.append(f"Tehlike: <b>{label}</b>")
    return "<br/>".join(parts)

# ───────────────────────────── HARİTA ─────────────────────────────
def build_region_map(
    businesses: Iterable,
    selected: Optional[str] = None,
    districts: Sequence[District] = DISTRICTS,
) -> "folium.Map":
    """Her ilçeye bir marker; renk/boyut ilçenin tehlike seviyesi ve seçim durumundan gelir."""
    businesses = list(businesses)
    center, zoom = map_target(selected, districts)

    m = folium.Map(location=list(center), zoom_start=zoom, tiles=None, scrollWheelZoom=True)
    folium.TileLayer(
        tiles="OpenStreetMap",
        name="openstreetmap",
        attr='&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors',
    ).add_to(m)
    m.get_root().header.add_child(folium.Element(MARKER_CSS))

    for d in districts:
        business = business_for_district(d.id, businesses)
        level = business.danger_level if business is not None else DEFAULT_DANGER
        folium.Marker(
            location=list(d.lat_lng),
            icon=marker_icon(level, selected == d.id),
            tooltip=d.name,
            popup=folium.Popup(_popup_html(d, business), max_width=220),
        ).add_to(m)
    return m


def legend_html() -> str:
    items = "".join(
        f"<span><span class='dot' style='background:{DANGER_COLORS[lvl]}'></span>{DANGER_LABELS_TR[lvl]}</span>"
        for lvl in DANGER_LEVELS
    )
    return f"<div class='legend'>{items}</div>"
