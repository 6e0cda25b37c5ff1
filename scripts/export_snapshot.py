# scripts/export_snapshot.py
from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from config import settings
from dataio.bootstrap import get_bootstrap
from services import queries
from utils.constants import DEFAULT_YEAR
from utils.tz import now_tr_str

# ────────────────────────────── Logging ayarı ──────────────────────────────────
LOG = logging.getLogger("export_snapshot")

# ───────────────────────────── Konfig & yardımcılar ────────────────────────────
@dataclass(frozen=True)
class Config:
    out_dir: Path = Path(settings.DATA_DIR)
    business_id: Optional[str] = None
    year: int = DEFAULT_YEAR
    dry_run: bool = False

def ensure_dirs(*paths: Path) -> None:
    for p in paths:
        if p is not None:
            Path(p).mkdir(parents=True, exist_ok=True)

def save_json(path: Path, obj: dict) -> None:
    ensure_dirs(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)

# ───────────────────────────── Sorgu planı ─────────────────────────────────────
def build_jobs(client, cfg: Config, business_name: Optional[str]) -> Dict[str, Callable[[], list]]:
    """ad → sorgu. Ad aynı zamanda CSV dosya adıdır."""
    return {
        "businesses":   lambda: queries.fetch_businesses(client),
        "vehicles":     lambda: queries.fetch_vehicle_data(client),
        "danger":       lambda: queries.fetch_danger_ranking(client),
        "monthly_fire": lambda: queries.fetch_monthly_fire_data(client, cfg.business_id, cfg.year),
        "yearly_fire":  lambda: queries.fetch_yearly_fire_data(client, cfg.business_id),
        "tree_types":   lambda: queries.fetch_tree_type_data(client, business_name),
        "fire_causes":  lambda: queries.fetch_fire_cause_data(client, business_name),
    }

def resolve_business_name(client, business_id: Optional[str]) -> Optional[str]:
    if not business_id:
        return None
    for b in queries.fetch_businesses(client):
        if b.id == str(business_id):
            return b.name
    LOG.warning("işletme bulunamadı: id=%s (ad filtresi uygulanmayacak)", business_id)
    return None

def run_snapshot(client, cfg: Config, source: Optional[str] = None) -> Dict[str, int]:
    """Tüm sorguları çalıştırır; dry_run değilse CSV + metadata.json yazar. Dönüş: ad → satır sayısı."""
    business_name = resolve_business_name(client, cfg.business_id)
    counts: Dict[str, int] = {}
    for name, job in build_jobs(client, cfg, business_name).items():
        records: List = job()
        counts[name] = len(records)
        LOG.info("  ✓ %s: %d kayıt", name, len(records))
        if not cfg.dry_run:
            ensure_dirs(cfg.out_dir)
            queries.records_frame(records).to_csv(cfg.out_dir / f"{name}.csv", index=False)

    if not cfg.dry_run:
        save_json(cfg.out_dir / "metadata.json", {
            "generated_at_tr": now_tr_str(),
            "source": source,
            "business_id": cfg.business_id,
            "year": cfg.year,
            "rows": counts,
        })
    return counts

# ─────────────────────────────────── CLI ───────────────────────────────────────
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tüm pano sorgularını çalıştır ve CSV anlık görüntüsü yaz")
    p.add_argument("--out-dir", type=Path, default=None, help="Çıktı klasörü (varsayılan: DATA_DIR)")
    p.add_argument("--business-id", default=None, help="Yangın sorgularını tek işletmeye daralt")
    p.add_argument("--year", type=int, default=DEFAULT_YEAR, help="Aylık yangın yılı")
    p.add_argument("--dry-run", action="store_true", help="Dosya yazmadan çalıştır")
    return p.parse_args(argv)

# ────────────────────────────────── Main ───────────────────────────────────────
def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )
    args = parse_args(argv)
    cfg = Config(
        out_dir=args.out_dir or Config.out_dir,
        business_id=args.business_id,
        year=args.year,
        dry_run=args.dry_run,
    )

    meta, client = get_bootstrap()
    if client is None:
        LOG.error(meta.get("error"))
        return 1

    LOG.info("▶ Anlık görüntü başlıyor… (%s)", meta.get("source"))
    t0 = time.time()
    try:
        run_snapshot(client, cfg, source=meta.get("source"))
    except Exception as e:  # noqa: BLE001
        LOG.error("backend okuma hatası: %s", e)
        return 1
    LOG.info("⏱ tamamlandı: %.1fs", time.time() - t0)
    return 0


if __name__ == "__main__":
    sys.exit(main())
