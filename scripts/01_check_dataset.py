# Usage: python scripts/01_check_dataset.py [--path data/companies.json] [--tolerance 0.01]
import argparse
import sys
from pathlib import Path

from esg_impact.config import ROOT_DIR, SETTINGS
from esg_impact.errors import DatasetError
from esg_impact.io import read_dataset
from esg_impact.logging_setup import configure_logging
from esg_impact.metrics import check_consistency, compute_totals


def resolve(path_like: str | Path) -> Path:
    p = Path(path_like)
    return p if p.is_absolute() else (ROOT_DIR / p)


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--path", default=str(SETTINGS.dataset_path))
    ap.add_argument("--tolerance", type=float, default=SETTINGS.consistency_tolerance)
    args = ap.parse_args()
    configure_logging()

    path = resolve(args.path)
    try:
        ds = read_dataset(path)
    except DatasetError as e:
        print(f"[error] {e}")
        sys.exit(2)

    missing = sorted(cid for cid in ds.timeseries if cid not in {c.id for c in ds.companies})
    if missing:
        print(f"[info] time series without a company (skipped on the dashboard): {', '.join(missing)}")

    problems = check_consistency(ds.companies, args.tolerance)
    for msg in problems:
        print(f"[warn] {msg}")

    totals = compute_totals(ds.companies)
    print(f"Checked: {path}  companies: {len(ds.companies)}  "
          f"collection: {totals.collection:,.0f} kg  co2: {totals.co2:.2f} t")
    sys.exit(1 if problems else 0)
