from __future__ import annotations
import logging

import streamlit as st
st.set_page_config(page_title="Orman Yangın Risk Paneli", layout="wide")  # ← ilk Streamlit çağrısı

# ── config / local imports
from config.settings import APP_NAME, LOG_LEVEL, QUERY_CACHE_TTL
from dataio.bootstrap import get_bootstrap
from services import queries
from utils.constants import DEFAULT_YEAR, YEAR_TABLES
from utils.geo import business_for_district, find_district
from utils.ui import SMALL_UI_CSS, header_with_help
from components.last_update import show_last_update_badge
from components.region_map import get_selection, render_region_map
from components.charts import (
    chart_section,
    render_business_card,
    render_business_kpis,
    render_cause_chart,
    render_danger_ranking,
    render_monthly_chart,
    render_tree_chart,
    render_vehicle_chart,
    render_yearly_chart,
)

# ────────────────────────────── Logging ayarı ──────────────────────────────────
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
)
LOG = logging.getLogger("app")

# ── Supabase istemcisi (oturumlar arası tek nesne)
@st.cache_resource(show_spinner=False)
def _bootstrap():
    return get_bootstrap()

META, CLIENT = _bootstrap()

# ── Sorgular (st.cache_data: TTL + aynı argümanla tekrar okuma yok)
# İstemci hash'lenemez; "_client" ön eki cache anahtarından hariç tutar.
@st.cache_data(show_spinner=False, ttl=QUERY_CACHE_TTL)
def load_businesses(_client):
    return queries.fetch_businesses(_client)

@st.cache_data(show_spinner=False, ttl=QUERY_CACHE_TTL)
def load_vehicle_data(_client):
    return queries.fetch_vehicle_data(_client)

@st.cache_data(show_spinner=False, ttl=QUERY_CACHE_TTL)
def load_danger_ranking(_client):
    return queries.fetch_danger_ranking(_client)

@st.cache_data(show_spinner=False, ttl=QUERY_CACHE_TTL)
def load_monthly(_client, business_id, year):
    return queries.fetch_monthly_fire_data(_client, business_id, year)

@st.cache_data(show_spinner=False, ttl=QUERY_CACHE_TTL)
def load_yearly(_client, business_id):
    return queries.fetch_yearly_fire_data(_client, business_id)

@st.cache_data(show_spinner=False, ttl=QUERY_CACHE_TTL)
def load_tree_types(_client, business_name):
    return queries.fetch_tree_type_data(_client, business_name)

@st.cache_data(show_spinner=False, ttl=QUERY_CACHE_TTL)
def load_fire_causes(_client, business_name):
    return queries.fetch_fire_cause_data(_client, business_name)

# ─────────────────────────── UI ───────────────────────────
st.markdown(SMALL_UI_CSS, unsafe_allow_html=True)
st.title(APP_NAME)

if CLIENT is None:
    st.error(META.get("error", "Supabase bağlantısı yok."))
    st.stop()

show_last_update_badge(
    app_name=META.get("app_name", APP_NAME),
    source=META.get("source"),
    cache_ttl=QUERY_CACHE_TTL,
    on_reload=st.cache_data.clear,
)

try:
    BUSINESSES = load_businesses(CLIENT)
except Exception as e:
    LOG.error("işletme listesi alınamadı: %s", e)
    st.error(f"İşletme listesi alınamadı: {e}")
    st.stop()

selection = get_selection()

# ── sidebar
with st.sidebar:
    st.markdown("### Filtreler")
    options = ["Tümü"] + [b.id for b in BUSINESSES]
    names = {b.id: b.name for b in BUSINESSES}
    business_id = st.selectbox("İşletme", options, format_func=lambda o: names.get(o, o))
    business_id = None if business_id == "Tümü" else business_id
    business_name = names.get(business_id) if business_id else None
    year = st.selectbox("Yıl", list(YEAR_TABLES), index=list(YEAR_TABLES).index(DEFAULT_YEAR))

render_business_kpis(BUSINESSES)

col_map, col_right = st.columns([1.0, 1.4])

with col_map:
    render_region_map(BUSINESSES, selection)

with col_right:
    district = find_district(selection.selected)
    if district is not None:
        header_with_help(f"📍 {district.name}", district.province)
        render_business_card(business_for_district(district.id, BUSINESSES))
        st.markdown("---")

    chart_section("🚒 Araç Envanteri", "Toplam araç ve yangında kullanılan araç",
                  lambda: load_vehicle_data(CLIENT), render_vehicle_chart)
    chart_section("🔥 Tehlike Sıralaması", "Tehlike türüne göre skor (25/50/75/100)",
                  lambda: load_danger_ranking(CLIENT), render_danger_ranking)

c1, c2 = st.columns(2)
with c1:
    chart_section(f"📅 Aylık Yangın ({year})", "Seçili işletme ve yıl için aylık yangın sayısı",
                  lambda: load_monthly(CLIENT, business_id, year), render_monthly_chart)
with c2:
    chart_section("📈 Yıllık Yangın", "2023–2025 yangın sayıları",
                  lambda: load_yearly(CLIENT, business_id), render_yearly_chart)

c3, c4 = st.columns(2)
with c3:
    chart_section("🌳 Ağaç Türleri", "Tehlikeli yangınlarda ağaç türü dağılımı",
                  lambda: load_tree_types(CLIENT, business_name), render_tree_chart)
with c4:
    chart_section("❓ Yangın Nedenleri", "İşletme bazında yangın nedenleri",
                  lambda: load_fire_causes(CLIENT, business_name), render_cause_chart)
