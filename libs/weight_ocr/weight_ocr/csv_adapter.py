# weight_ocr/libs/weight_ocr/weight_ocr/csv_adapter.py
from __future__ import annotations
import csv
from pathlib import Path

import pandas as pd

from .models import InferenceResult, TextFragment
from .confidence import parse as parse_confidence, to_percent


CSV_HEADER = ["text", "det_conf", "rec_conf", "image"]


def save_csv(path: str | Path, result: InferenceResult, image_name: str | None = None) -> None:
    """
    One row per recognized fragment, confidences as percent strings.
    'image' can be passed, otherwise left empty.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_HEADER)
        writer.writeheader()
        for t in result.texts:
            writer.writerow({
                "text": t.text,
                "det_conf": to_percent(t.det_conf),
                "rec_conf": to_percent(t.rec_conf),
                "image": image_name or "",
            })


def load_csv(path: str | Path) -> list[TextFragment]:
    """Read fragments written by save_csv; [] if the file does not exist."""
    p = Path(path)
    if not p.exists():
        return []

    # keep "0250" and "" as written
    df = pd.read_csv(p, dtype=str, keep_default_na=False)
    items: list[TextFragment] = []
    for _, row in df.iterrows():
        items.append(
            TextFragment(
                text=row.get("text", ""),
                det_conf=parse_confidence(row.get("det_conf")) or 0.0,
                rec_conf=parse_confidence(row.get("rec_conf")) or 0.0,
            )
        )
    return items
