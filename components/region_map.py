# components/region_map.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

import streamlit as st
from streamlit_folium import st_folium

from utils.geo import DISTRICTS, District, district_danger, group_by_province, map_target, resolve_clicked_district
from utils.ui import build_region_map, legend_html, subheader_with_help

LOG = logging.getLogger(__name__)

Listener = Callable[[str], None]


class DistrictSelection:
    """
    Seçili ilçe durumu: seçim yok → bölge merkezi, seçili → ilçe koordinatı.
    Marker tıklaması ve liste butonu aynı select() çağrısını kullanır.
    Seçimi kaldırma burada yok; üst bileşen clear() ile yapar.
    """

    def __init__(self, districts: Sequence[District] = DISTRICTS) -> None:
        self._districts = tuple(districts)
        self._selected: Optional[str] = None
        self._listeners: List[Listener] = []

    @property
    def selected(self) -> Optional[str]:
        return self._selected

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def select(self, district_id: str) -> None:
        if district_id == self._selected:
            return
        LOG.debug("ilçe seçildi: %s", district_id)
        self._selected = district_id
        for listener in list(self._listeners):
            listener(district_id)

    def clear(self) -> None:
        self._selected = None

    def map_target(self) -> Tuple[Tuple[float, float], int]:
        return map_target(self._selected, self._districts)


def get_selection(key: str = "district_selection") -> DistrictSelection:
    """Oturum başına tek seçim nesnesi (st.session_state)."""
    if key not in st.session_state:
        st.session_state[key] = DistrictSelection()
    return st.session_state[key]


def _map_key() -> str:
    return f"region_map_{st.session_state.get(_MAP_NONCE, 0)}"


def _select(selection: DistrictSelection, district_id: str) -> None:
    """
    Marker ve buton ortak yolu. Harita bileşeni yeni anahtarla kurulur;
    st_folium eski tıklamayı sonraki rerun'larda tekrar döndürmez.
    """
    st.session_state[_MAP_NONCE] = st.session_state.get(_MAP_NONCE, 0) + 1
    if district_id != selection.selected:
        selection.select(district_id)
        st.rerun()


def render_region_map(businesses: list, selection: DistrictSelection, height: int = 300) -> None:
    subheader_with_help("🌲 Bölge Haritası", "Marker ya da ilçe butonuna tıklayarak ilçe seçin")

    center, zoom = selection.map_target()
    m = build_region_map(businesses, selection.selected)
    ret = st_folium(
        m, key=_map_key(), height=height, use_container_width=True,
        center=list(center), zoom=zoom,
        returned_objects=["last_object_clicked"],
    )
    clicked = resolve_clicked_district(ret)
    if clicked:
        _select(selection, clicked)

    # İl bazlı ilçe butonları
    for province, dists in group_by_province(DISTRICTS).items():
        st.caption(province.upper())
        cols = st.columns(min(len(dists), 4))
        for i, d in enumerate(dists):
            level = district_danger(d.id, businesses)
            dot = _LEVEL_DOTS.get(level, _LEVEL_DOTS["low"])
            is_sel = selection.selected == d.id
            if cols[i % len(cols)].button(
                f"{dot} {d.name}", key=f"district_btn_{d.id}",
                type="primary" if is_sel else "secondary",
            ):
                _select(selection, d.id)

    st.caption("Tehlike Seviyeleri")
    st.markdown(legend_html(), unsafe_allow_html=True)


_MAP_NONCE = "_region_map_nonce"

# Buton etiketinde hex renk kullanılamıyor; paletle aynı tonda emoji
_LEVEL_DOTS = {"low": "🟢", "medium": "🟡", "high": "🟠", "critical": "🔴"}
