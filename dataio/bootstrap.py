# dataio/bootstrap.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from supabase import Client, create_client

from config import settings

LOG = logging.getLogger(__name__)


def _missing_settings() -> list[str]:
    missing = []
    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if not settings.SUPABASE_KEY:
        missing.append("SUPABASE_KEY")
    return missing


def get_client(url: Optional[str] = None, key: Optional[str] = None) -> Client:
    """Supabase istemcisi. Parametre verilmezse config.settings kullanılır."""
    return create_client(url or settings.SUPABASE_URL, key or settings.SUPABASE_KEY)


def get_bootstrap() -> Tuple[Dict[str, Any], Optional[Client]]:
    """
    DÖNÜŞ:
      meta  : {"source": "...", "app_name": "...", "error": "...?"}
      client: supabase.Client ya da None (ayar eksikse)
    Ayar eksikliği hata fırlatmaz; çağıran taraf meta["error"]'u gösterir.
    """
    app_name = settings.APP_NAME
    missing = _missing_settings()
    if missing:
        LOG.warning("Supabase ayarları eksik: %s", ", ".join(missing))
        return (
            {
                "source": None,
                "app_name": app_name,
                "error": f"Supabase bağlantısı kurulamadı; eksik ortam değişkenleri: {', '.join(missing)}",
            },
            None,
        )

    client = get_client()
    LOG.info("Supabase istemcisi hazır: %s", settings.SUPABASE_URL)
    return ({"source": f"supabase:{settings.SUPABASE_URL}", "app_name": app_name}, client)
