# -*- coding: utf-8 -*-
"""
Test fixtures: Supabase istemcisinin yerine geçen sahte istemci ve örnek satırlar.

pytest tests/ -v
"""
import threading
from typing import Any, Dict, List

import pytest


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    def __init__(self, client: "FakeClient", source: str):
        self._client = client
        self._source = source
        self._columns = "*"

    def select(self, columns: str = "*"):
        self._columns = columns
        return self

    def execute(self):
        return self._client._execute(self._source, self._columns)


class FakeClient:
    """client.table(ad).select(kolonlar).execute().data arayüzü."""

    def __init__(self, tables: Dict[str, List[Dict[str, Any]]] | None = None,
                 errors: Dict[str, Exception] | None = None):
        self.tables = dict(tables or {})
        self.errors = dict(errors or {})
        self.reads: List[tuple] = []
        self._lock = threading.Lock()

    def table(self, source: str) -> FakeQuery:
        return FakeQuery(self, source)

    def _execute(self, source: str, columns: str) -> FakeResponse:
        with self._lock:
            self.reads.append((source, columns))
        if source in self.errors:
            raise self.errors[source]
        return FakeResponse(self.tables.get(source))

    def read_count(self, source: str) -> int:
        return sum(1 for s, _ in self.reads if s == source)


@pytest.fixture
def business_rows():
    return [
        {"isletme_id": 1, "isletme_ad": "Gemlik Orman İşletmesi"},
        {"isletme_id": 2, "isletme_ad": "Keles Orman İşletmesi"},
        {"isletme_id": 3, "isletme_ad": "Yeni Şube Orman İşletmesi"},
        {"isletme_id": 4, "isletme_ad": None},
    ]


@pytest.fixture
def vehicle_rows():
    return [
        {"isletme_ad": "Gemlik Orman İşletmesi", "isletme_toplam_arac": 10,
         "yanginda_kullanilan_arac": 7, "arac_asimi": 3},
        {"isletme_ad": "Keles Orman İşletmesi", "isletme_toplam_arac": "5",
         "yanginda_kullanilan_arac": None, "arac_asimi": None},
    ]


@pytest.fixture
def danger_rows():
    return [
        {"isletme_ad": "Gemlik Orman İşletmesi", "tehlike_turu": "Yüksek"},
        {"isletme_ad": "Keles Orman İşletmesi", "tehlike_turu": "Çok Yüksek"},
    ]


@pytest.fixture
def vehicle_type_rows():
    return [
        {"isletme_id": 1, "adet": 4, "Arac": {"arac_tur_adi": "Arazöz"}},
        {"isletme_id": 1, "adet": "2", "Arac": None},
        {"isletme_id": 2, "adet": 1, "Arac": {"arac_tur_adi": "İlk Müdahale"}},
    ]


@pytest.fixture
def fake_client(business_rows, vehicle_rows, danger_rows, vehicle_type_rows):
    return FakeClient({
        "Isletme": business_rows,
        "isletme_arac_asimi_view": vehicle_rows,
        "isletme_tehlike_siralama_view": danger_rows,
        "Isletme_arac": vehicle_type_rows,
    })


@pytest.fixture
def make_client():
    return FakeClient
