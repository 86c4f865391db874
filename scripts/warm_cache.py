#!/usr/bin/env python3
"""Warm a running proxy's cache by requesting a set of FRED series in one batch."""
import argparse
import sys

import requests

API = "http://localhost:3001"
DEFAULT_SERIES = ["GDP", "CPIAUCSL", "UNRATE", "FEDFUNDS", "DGS10"]


def warm(api: str, series: list[str], start_date: str | None, end_date: str | None) -> dict:
    """POST the batch and return the per-series result map."""
    body = {"series": series}
    if start_date:
        body["start_date"] = start_date
    if end_date:
        body["end_date"] = end_date

    resp = requests.post(f"{api}/series/batch", json=body, timeout=120)
    resp.raise_for_status()
    return resp.json()


def is_error(result) -> bool:
    return isinstance(result, dict) and "error" in result and "observations" not in result


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("series", nargs="*", default=DEFAULT_SERIES, help="FRED series ids")
    parser.add_argument("--api", default=API, help="proxy base URL")
    parser.add_argument("--start-date", default=None)
    parser.add_argument("--end-date", default=None)
    args = parser.parse_args()

    print(f"Warming {len(args.series)} series via {args.api} ...")
    results = warm(args.api, args.series, args.start_date, args.end_date)

    failures = {sid: r for sid, r in results.items() if is_error(r)}
    for sid, result in results.items():
        if sid in failures:
            detail = result.get("status") or result.get("message", "")
            print(f"  ⚠ {sid}: {result['error']} ({detail})")
        else:
            print(f"  ✓ {sid}: {len(result.get('observations', []))} observations")

    health = requests.get(f"{args.api}/health", timeout=10).json()
    print(f"\nDone: {len(results) - len(failures)}/{len(results)} cached, cache_size={health['cache_size']}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
