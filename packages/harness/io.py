"""
Benchmark output: one CSV row per simulated game plus a JSON manifest
describing the run (word lists, session config, summary).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

BASE_FIELDS = ["mode", "answer", "success", "guesses", "reason", "time_ms", "rejected"]


def _round_fields(max_guesses: int) -> List[str]:
    fields: List[str] = []
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"patt_{i}"]
    return fields


def _row(result: Dict, mode: str, max_guesses: int) -> Dict:
    row = {
        "mode": mode,
        "answer": result["answer"],
        "success": result["success"],
        "guesses": result["guesses"],
        "reason": result.get("reason", ""),
        "time_ms": round(float(result["time_ms"]), 3),
        "rejected": " ".join(result.get("rejected", [])),
    }
    row.update(dict.fromkeys(_round_fields(max_guesses), ""))
    for i, (guess, patt) in enumerate(result.get("history", [])[:max_guesses], start=1):
        row[f"guess_{i}"] = guess
        # leading apostrophe: spreadsheets read "-GG-G" as a formula
        row[f"patt_{i}"] = "'" + patt
    return row


def write_csv(results: List[Dict], path: str, max_guesses: int, mode: str) -> str:
    """Write `results` (run_case dicts) to `path`; unused round columns stay empty."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=BASE_FIELDS + _round_fields(max_guesses))
        w.writeheader()
        w.writerows(_row(r, mode, max_guesses) for r in results)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, default=str), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id used in report file names."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                             capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip()
