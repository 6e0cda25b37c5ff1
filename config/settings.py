# config/settings.py
from __future__ import annotations

import os

# ── Supabase bağlantısı ──────────────────────────────────────────────────────
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")

# ── Uygulama ─────────────────────────────────────────────────────────────────
APP_NAME = os.getenv("APP_NAME", "Orman Yangın Risk Paneli")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# st.cache_data ömrü (saniye); sorgu sonuçları bu süre boyunca yeniden okunmaz
QUERY_CACHE_TTL = int(os.getenv("QUERY_CACHE_TTL", "300"))

# Eşzamanlı okuma havuzu (iş yeri birleşimi 4, yıllık özet 3 okuma açar)
FETCH_MAX_WORKERS = int(os.getenv("FETCH_MAX_WORKERS", "4"))

# Anlık görüntü (snapshot) CLI çıktısı
DATA_DIR = os.getenv("DATA_DIR", "data")
