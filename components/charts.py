# components/charts.py
from __future__ import annotations

from typing import Callable, List, Optional

import streamlit as st

from services.models import Business
from services.queries import records_frame
from utils.constants import DANGER_LABELS_TR, DEFAULT_DANGER
from utils.ui import render_kpi_row, subheader_with_help


def chart_section(title: str, help_text: str, loader: Callable[[], list], render: Callable[[list], None]) -> None:
    """
    Bir grafik bölümü. Backend hatası yalnız bu bölümü hata durumuna düşürür,
    diğer bölümler çizilmeye devam eder.
    """
    subheader_with_help(title, help_text)
    try:
        records = loader()
    except Exception as e:
        st.error(f"Veri alınamadı: {e}")
        return
    if not records:
        st.info("Kayıt yok.")
        return
    render(records)


def render_business_kpis(businesses: List[Business]) -> None:
    total = sum(b.total_vehicles for b in businesses)
    used = sum(b.used_in_fire_vehicles for b in businesses)
    critical = sum(1 for b in businesses if b.danger_level == "critical")
    render_kpi_row([
        ("İşletme", len(businesses), "Kayıtlı orman işletmesi sayısı"),
        ("Toplam araç", total, "Tüm işletmelerdeki araç sayısı"),
        ("Yangında kullanılan", used, "Yangına sevk edilen araç sayısı"),
        ("Kritik işletme", critical, "Tehlike seviyesi 'Çok Yüksek' olan işletmeler"),
    ])


def render_vehicle_chart(records: list) -> None:
    df = records_frame(records).set_index("business_name")
    df = df.rename(columns={"total_vehicles": "Toplam", "used_vehicles": "Yangında", "excess": "Aşım"})
    st.bar_chart(df[["Toplam", "Yangında"]], stack=False)
    st.dataframe(df, use_container_width=True, height=220)


def render_danger_ranking(records: list) -> None:
    df = records_frame(records)
    df["Seviye"] = df["level"].map(lambda lvl: DANGER_LABELS_TR.get(lvl, DANGER_LABELS_TR[DEFAULT_DANGER]))
    df = df.rename(columns={"business_name": "İşletme", "danger_score": "Skor"})
    # sıralama korunmalı: kategori sırası sorgu sırası
    st.bar_chart(df, x="İşletme", y="Skor", sort=False)
    st.dataframe(df[["İşletme", "Skor", "Seviye"]], use_container_width=True, hide_index=True, height=220)


def render_monthly_chart(records: list) -> None:
    df = records_frame(records).rename(columns={"month": "Ay", "count": "Yangın"})
    st.bar_chart(df, x="Ay", y="Yangın", sort=False)


def render_yearly_chart(records: list) -> None:
    df = records_frame(records)
    df["year"] = df["year"].astype(str)
    st.bar_chart(df.rename(columns={"year": "Yıl", "count": "Yangın"}), x="Yıl", y="Yangın")


def render_tree_chart(records: list) -> None:
    df = records_frame(records).rename(columns={"tree_type": "Ağaç türü", "count": "Yangın"})
    st.bar_chart(df, x="Ağaç türü", y="Yangın", horizontal=True)


def render_cause_chart(records: list) -> None:
    df = records_frame(records).rename(columns={"cause": "Neden", "count": "Yangın"})
    st.bar_chart(df, x="Neden", y="Yangın", horizontal=True)


def render_business_card(business: Optional[Business]) -> None:
    if business is None:
        st.info("Bu ilçeye bağlı işletme bulunamadı.")
        return
    c1, c2, c3 = st.columns(3)
    c1.metric("İşletme", business.name)
    c2.metric("Araç (toplam / yangında)", f"{business.total_vehicles} / {business.used_in_fire_vehicles}")
    c3.metric("Tehlike", DANGER_LABELS_TR.get(business.danger_level, DANGER_LABELS_TR[DEFAULT_DANGER]))
    if business.vehicle_types:
        st.markdown("**Araç türleri**")
        for vt in business.vehicle_types:
            st.write(f"- {vt.type}: {vt.count}")
