# components/last_update.py
from __future__ import annotations

import html
from typing import Callable, Optional

import streamlit as st

from utils.tz import now_tr_str


def show_last_update_badge(
    *,
    app_name: str,
    source: Optional[str] = None,     # "supabase:https://..." gibi
    cache_ttl: Optional[int] = None,  # saniye
    tz_label: Optional[str] = "TR",
    show_actions: bool = True,
    on_reload: Optional[Callable[[], None]] = None,  # cache temizleyici
) -> None:
    """
    Başlığın altında tazelik rozeti + yeniden yükleme butonu.

    Ör: "Orman Yangın Risk Paneli • Kaynak: supabase:https://x.supabase.co
         • Önbellek: 5 dk • Şu an (TR): 2025-07-12 14:05"
    """
    st.session_state.setdefault("last_reload_at_tr", now_tr_str())

    parts = [f"<strong style='font-size:.98rem'>{html.escape(app_name)}</strong>"]
    if source:
        parts.append(f"Kaynak: <b>{html.escape(source)}</b>")
    if cache_ttl:
        parts.append(f"Önbellek: ~{max(1, int(cache_ttl) // 60)} dk")
    parts.append(f"<span style='color:#6b7280'>Şu an ({tz_label or ''}): {html.escape(now_tr_str())}</span>")

    # Tema-duyarlı renkler
    try:
        base = st.get_option("theme.base") or "light"
    except Exception:
        base = "light"
    bg = "#0e1117" if base == "dark" else "#f8fafc"
    fg = "#d1d5db" if base == "dark" else "#0b1220"
    border = "#2b313e" if base == "dark" else "#e5e7eb"

    st.markdown(
        f"""
        <div style="
            background:{bg};
            color:{fg};
            border:1px solid {border};
            padding:.55rem .7rem;
            border-radius:.6rem;
            display:flex; gap:.6rem; flex-wrap:wrap;
            font-size:.88rem; line-height:1.35;">
            {' • '.join(parts)}
        </div>
        """,
        unsafe_allow_html=True,
    )

    if show_actions:
        c1, c2 = st.columns([0.22, 0.78])
        with c1:
            if st.button("↻ Yeniden yükle", help="Önbelleği temizle & veriyi yeniden oku"):
                if callable(on_reload):
                    on_reload()
                st.session_state["last_reload_at_tr"] = now_tr_str()
                st.rerun()
        with c2:
            st.caption(f"Son yeniden yükleme ({tz_label or ''}): {st.session_state.get('last_reload_at_tr', '-')}")
