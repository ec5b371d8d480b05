"""
Runner: fetches one country's report and prints its latest aggregates.
"""
from __future__ import annotations
from pathlib import Path
import argparse, logging, sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from dotenv import load_dotenv
load_dotenv(dotenv_path=ROOT / ".env", override=False, encoding="utf-8")

from corona_tracker.api.client import fetch_report
from corona_tracker.api.errors import CoronaTrackerError
from corona_tracker.utils.config import DEFAULT_COUNTRY_CODE

def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--country", default=DEFAULT_COUNTRY_CODE, help="ISO country code, e.g. DE.")
    parser.add_argument("--no-timelines", action="store_true", help="Skip per-day timelines.")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    try:
        report = fetch_report(args.country, include_timelines=not args.no_timelines)
    except (CoronaTrackerError, ValueError) as exc:
        logging.getLogger("run_fetch").error("Fetch failed: %s", exc)
        return 1
    if report is None:
        print(f"[runner] no data for {args.country}.")
        return 1

    print(f"[runner] {len(report.locations)} location(s); latest: "
          f"confirmed={report.latest.confirmed:,} deaths={report.latest.deaths:,} "
          f"recovered={report.latest.recovered:,}")
    for loc in report.locations:
        name = f"{loc.country} ({loc.province})" if loc.province else loc.country
        print(f"  - {name}: updated {loc.last_updated:%d.%m.%Y %H:%M:%S}, "
              f"timeline days={len(loc.timeline('confirmed'))}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
