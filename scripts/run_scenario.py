"""CLI for replaying elevator dispatch scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from elevator_core.errors import ConfigurationError
from elevator_core.scenario import ScenarioResult, load_scenario, run_scenario

logger = logging.getLogger("elevator_core.scenario")


def _log_hooks() -> Dict:
    return {
        "started": lambda payload: logger.info("System %s", payload["status"]),
        "allocated": lambda payload: logger.info(
            "Elevator %s took %s batch %s",
            payload["elevator_id"],
            payload["direction"].value,
            [str(request) for request in payload["requests"]],
        ),
        "stopped": lambda payload: logger.info(
            "System %s after %s drain ticks, %s queued requests discarded",
            payload["status"],
            payload["drain_ticks"],
            payload["discarded_requests"],
        ),
    }


def save_results(output_path: Optional[Path], result: ScenarioResult) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(result.to_dict(), indent=2))


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write per-tick building reports as JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Log allocation and lifecycle events")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        scenario = load_scenario(args.config)
        result = run_scenario(scenario, hooks=_log_hooks())
    except (ValidationError, ConfigurationError) as exc:
        print(f"Invalid scenario {args.config}: {exc}", file=sys.stderr)
        return 2

    print(f"Scenario: {scenario.name}")
    if scenario.description:
        print(scenario.description)
    for tick, report in enumerate(result.reports):
        print(f"--- tick {tick} ---")
        print(report)
    for rejected in result.rejected:
        print(f"Rejected at tick {rejected.tick}: '{rejected.requests}' ({rejected.error})")
    if result.final_report is not None:
        print("--- final ---")
        print(result.final_report)

    save_results(args.output, result)
    if args.output:
        print(f"Saved reports to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
