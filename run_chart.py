from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure "src/" is on sys.path so absolute imports work even when running this file directly.
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Load .env before the config module reads the environment.
load_dotenv(dotenv_path=ROOT / ".env", override=False, encoding="utf-8")

from corona_tracker.api.errors import CoronaTrackerError
from corona_tracker.pipeline import build_chart
from corona_tracker.utils.config import DEFAULT_COUNTRY_CODE, DEFAULT_OUTPUT_PATH


def main() -> int:
    """Fetch the country report and save its chart.

    Environment variables:
        CORONA_COUNTRY_CODE: Default country (default: 'DE').
        CORONA_OUTPUT_PATH: Default image path (default: 'reports/assets/corona.png').
        CORONA_API_BASE_URL, CORONA_HTTP_TIMEOUT, CORONA_RECOVERED_LABEL: see utils/config.py.

    Returns:
        Process exit code: 0 on success, 1 when no chart was produced.
    """
    parser = argparse.ArgumentParser(description="Plot COVID-19 timelines for one country.")
    parser.add_argument("--country", default=DEFAULT_COUNTRY_CODE, help="ISO country code, e.g. DE.")
    parser.add_argument("--out", default=str(DEFAULT_OUTPUT_PATH), help="Output image path (.png).")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        path = build_chart(args.country, args.out)
    except (CoronaTrackerError, ValueError) as exc:
        logging.getLogger("run_chart").error("Chart failed: %s", exc)
        return 1
    if path is None:
        return 1
    print(f"[chart] saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
