"""Annotate every assistant turn of a JSONL conversation transcript."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from app.services.answer.pipeline import Message, annotate_conversation


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Annotate assistant answers in a transcript.")
    parser.add_argument("--in", dest="inp", required=True, help="JSONL, one message per line")
    parser.add_argument("--out", dest="out", required=True)
    return parser.parse_args()


def load_messages(path: Path) -> Tuple[List[Message], int]:
    """Read messages; lines that are not message objects are counted as errors."""
    messages: List[Message] = []
    errors = 0
    with path.open(encoding="utf-8") as fh:
        for line in fh:
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError:
                errors += 1
                continue
            if not isinstance(data, dict) or not isinstance(data.get("content"), str):
                errors += 1
                continue
            messages.append(
                Message(
                    role=str(data.get("role", "")),
                    content=data["content"],
                    sources=data.get("sources"),
                )
            )
    return messages, errors


def annotate_transcript(inp: Path, out: Path) -> Dict[str, Any]:
    messages, errors = load_messages(inp)
    views = annotate_conversation(messages)

    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as fh:
        for index, view in views:
            record = {"message_index": index, **view.to_dict()}
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")

    return {
        "total_messages": len(messages),
        "annotated": len(views),
        "uncertain": sum(1 for _, view in views if view.uncertain),
        "errors": errors,
    }


def main() -> int:
    args = parse_args()
    summary = annotate_transcript(Path(args.inp), Path(args.out))
    print(
        f"[annotate] messages={summary['total_messages']}, "
        f"annotated={summary['annotated']}, uncertain={summary['uncertain']}, "
        f"errors={summary['errors']}"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
