"""Bundled drug seed set."""
import json
from pathlib import Path

from drugcatalog.schemas.responses import DrugSeedRecord

SEED_FILE = Path(__file__).parent / "drug_data.json"


def load_seed_file(path: str | Path | None = None) -> list[DrugSeedRecord]:
    seed_path = Path(path) if path else SEED_FILE
    with open(seed_path, encoding="utf-8") as f:
        raw = json.load(f)
    return [DrugSeedRecord(**entry) for entry in raw]
