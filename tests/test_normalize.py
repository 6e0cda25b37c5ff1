# -*- coding: utf-8 -*-
import pytest

from utils.constants import DANGER_LABELS, DISTRICT_MAP, MONTH_ALIASES
from utils.normalize import (
    danger_score,
    fold_turkish,
    match_month,
    resolve_danger_level,
    resolve_district_id,
    short_business_name,
    slugify_district,
    to_int,
)


class TestDistrictId:

    @pytest.mark.parametrize("name,expected", sorted(DISTRICT_MAP.items()))
    def test_known_names_use_table(self, name, expected):
        assert resolve_district_id(name) == expected

    def test_unmapped_name_becomes_ascii_slug(self):
        assert resolve_district_id("Yeni Şube Orman İşletmesi") == "yeni-sube-orman-isletmesi"

    def test_whitespace_runs_collapse_to_single_hyphen(self):
        assert resolve_district_id("Çağlayan   Göl\tÜstü") == "caglayan-gol-ustu"

    def test_empty_or_missing_name(self):
        assert resolve_district_id(None) is None
        assert resolve_district_id("") is None
        assert resolve_district_id("   ") is None

    def test_outer_whitespace_is_dropped(self):
        assert slugify_district("  Yeni Şube ") == "yeni-sube"
        assert slugify_district(" \t ") == ""

    @pytest.mark.parametrize("name", ["Yeni Şube", "İĞNEADA ÖZEL", "ışık-çam", "already-slug"])
    def test_slug_is_idempotent(self, name):
        once = slugify_district(name)
        assert slugify_district(once) == once

    def test_fold_covers_upper_and_lower_forms(self):
        assert fold_turkish("çÇğĞıİöÖşŞüÜ") == "ccggiioossuu"

    def test_dotted_capital_i_leaves_no_combining_mark(self):
        assert slugify_district("İnegöl") == "inegol"


class TestDangerLevel:

    @pytest.mark.parametrize("diacritic,ascii_", [
        ("Çok Yüksek", "Cok Yuksek"),
        ("Yüksek", "Yuksek"),
        ("Düşük", "Dusuk"),
    ])
    def test_both_spellings_same_bucket(self, diacritic, ascii_):
        assert resolve_danger_level(diacritic) == resolve_danger_level(ascii_)

    @pytest.mark.parametrize("label,level", sorted(DANGER_LABELS.items()))
    def test_table_entries(self, label, level):
        assert resolve_danger_level(label) == level

    @pytest.mark.parametrize("label", [None, "", "bilinmeyen", "yüksek", "KRİTİK"])
    def test_unknown_defaults_to_low(self, label):
        assert resolve_danger_level(label) == "low"

    def test_scores(self):
        assert [danger_score(l) for l in ("low", "medium", "high", "critical")] == [25, 50, 75, 100]
        assert danger_score("???") == 25


class TestMonth:

    def test_every_alias_maps_to_its_month(self):
        for idx, aliases in enumerate(MONTH_ALIASES):
            for alias in aliases:
                assert match_month(alias) == idx

    @pytest.mark.parametrize("value,idx", [
        ("Ocak", 0), ("OCAK", 0), ("January", 0),
        ("Şubat", 1), ("MAYIS", 4), ("Ağustos", 7), ("eylul", 8), ("December", 11),
    ])
    def test_case_insensitive(self, value, idx):
        assert match_month(value) == idx

    @pytest.mark.parametrize("value", [None, "", "Oca", "13", " ocak"])
    def test_no_match(self, value):
        assert match_month(value) is None


def test_short_business_name():
    assert short_business_name("Gemlik Orman İşletmesi") == "Gemlik"
    assert short_business_name(None) == "İşletme"


@pytest.mark.parametrize("val,expected", [
    (None, 0), ("7", 7), (3.0, 3), ("abc", 0), (12, 12),
    ("Infinity", 0), ("-Infinity", 0), ("1e400", 0), (float("inf"), 0), ("NaN", 0),
])
def test_to_int(val, expected):
    assert to_int(val) == expected
