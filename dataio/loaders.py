# dataio/loaders.py
from __future__ import annotations

# --- imports ---
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Hashable, List, Mapping, Optional, Tuple

# --- config ---
from config.settings import FETCH_MAX_WORKERS

LOG = logging.getLogger(__name__)

Row = Dict[str, Any]

# ===================== tek okuma =====================

def read_source(client, source: str, columns: str = "*") -> List[Row]:
    """
    Tablo ya da view oku → satır listesi.
    Backend hatası olduğu gibi yukarı fırlatılır (yeniden deneme yok).
    Boş sonuç [] döner; "veri yok" hata değildir.
    """
    try:
        resp = client.table(source).select(columns).execute()
    except Exception:
        LOG.exception("okuma başarısız: %s", source)
        raise
    rows = resp.data or []
    LOG.debug("okundu: %s (%d satır)", source, len(rows))
    return rows

# ===================== eşzamanlı okuma =====================

def fetch_all(
    client,
    requests: Mapping[Hashable, Tuple[str, str]],
    max_workers: Optional[int] = None,
) -> Dict[Hashable, List[Row]]:
    """
    requests = {anahtar: (kaynak, kolonlar), ...}
    Hepsini aynı anda başlatır, hepsini bekler; sonuç anahtarla eşlenir
    (tamamlanma sırası önemsiz). İlk hata çağırana fırlatılır, kısmi sonuç yok.
    """
    if not requests:
        return {}
    workers = max(1, min(int(max_workers or FETCH_MAX_WORKERS), len(requests)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            key: executor.submit(read_source, client, source, columns)
            for key, (source, columns) in requests.items()
        }
        return {key: fut.result() for key, fut in futures.items()}
