"""Audit statistics for annotated answers."""

from __future__ import annotations

import argparse
import json
from collections import Counter
from pathlib import Path
from statistics import mean
from typing import Any, Dict, List


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Audit annotated answers.")
    parser.add_argument("--in", dest="inp", required=True, help="Output of annotate_answers.py")
    return parser.parse_args()


def load_records(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        return []
    items: List[Dict[str, Any]] = []
    with path.open(encoding="utf-8") as fh:
        for line in fh:
            try:
                items.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    return items


def percentile(data: List[int], q: float) -> float:
    if not data:
        return 0.0
    data_sorted = sorted(data)
    k = (len(data_sorted) - 1) * q
    f = int(k)
    c = min(f + 1, len(data_sorted) - 1)
    if f == c:
        return float(data_sorted[int(k)])
    d0 = data_sorted[f] * (c - k)
    d1 = data_sorted[c] * (k - f)
    return float(d0 + d1)


def audit_answers(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    scheme_counts = [len(item.get("schemes", [])) for item in records]
    source_types = Counter(
        entry.get("source_type", "") for item in records for entry in item.get("sources", [])
    )
    section_keys = Counter(
        section.get("key", "") for item in records for section in item.get("sections", [])
    )
    missing = Counter(field for item in records for field in item.get("missing", []))

    return {
        "total_answers": len(records),
        "uncertain": sum(1 for item in records if item.get("uncertain")),
        "with_tabs": sum(1 for item in records if item.get("show_tabs")),
        "schemes_avg": mean(scheme_counts) if scheme_counts else 0,
        "schemes_p50": percentile(scheme_counts, 0.50),
        "schemes_p90": percentile(scheme_counts, 0.90),
        "by_source_type": dict(source_types),
        "by_section_key": dict(section_keys),
        "missing_fields": dict(missing),
    }


def main() -> int:
    args = parse_args()
    inp = Path(args.inp)
    report = audit_answers(load_records(inp))
    out_path = inp.parent / "audit_report.json"
    out_path.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"[audit] saved to {out_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
