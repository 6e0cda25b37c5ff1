# -*- coding: utf-8 -*-
import json

import pytest

from config import settings
from scripts import export_snapshot
from scripts.export_snapshot import Config, run_snapshot


@pytest.fixture
def full_client(fake_client):
    fake_client.tables.update({
        "Yangin_2023": [{"yangin_ay": "Temmuz", "isletme_id": 1}, {"yangin_ay": "Temmuz", "isletme_id": 2}],
        "Yangin_2024": [{"yangin_ay": "Ağustos", "isletme_id": 1}],
        "tehlikeli_yangin_agac_view": [
            {"isletme_ad": "Gemlik Orman İşletmesi", "agac_tur": "Kızılçam", "yangin_sayisi": 2},
        ],
        "isletme_yangin_nedenleri_view": [
            {"isletme_ad": "Keles Orman İşletmesi", "yangin_neden": "Yıldırım", "yangin_sayisi": 1},
        ],
    })
    return fake_client


def test_writes_csv_per_query_and_metadata(full_client, tmp_path):
    counts = run_snapshot(full_client, Config(out_dir=tmp_path), source="fake")
    assert counts["businesses"] == 4
    assert counts["monthly_fire"] == 12
    assert counts["yearly_fire"] == 3
    for name in counts:
        assert (tmp_path / f"{name}.csv").exists()
    meta = json.loads((tmp_path / "metadata.json").read_text(encoding="utf-8"))
    assert meta["rows"] == counts
    assert meta["source"] == "fake"


def test_business_filter_narrows_name_based_queries(full_client, tmp_path):
    counts = run_snapshot(full_client, Config(out_dir=tmp_path, business_id="1", dry_run=True))
    assert counts["tree_types"] == 1
    assert counts["fire_causes"] == 0
    assert not any(tmp_path.iterdir())


def test_main_without_settings_exits_1(monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_URL", "")
    monkeypatch.setattr(settings, "SUPABASE_KEY", "")
    assert export_snapshot.main(["--dry-run"]) == 1


def test_main_backend_fault_exits_1(monkeypatch, make_client, tmp_path):
    client = make_client(errors={"Isletme": RuntimeError("down")})
    monkeypatch.setattr(export_snapshot, "get_bootstrap", lambda: ({"source": "fake"}, client))
    assert export_snapshot.main(["--out-dir", str(tmp_path)]) == 1
