# fixture_runner.py
# Batch harness: run validate() over a directory of JSON fixtures whose file
# names encode the expected verdict (pass* -> valid, anything else -> invalid).

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from json_validator import DEPTH_LIMIT_DEFAULT, validate

logger = logging.getLogger(__name__)


def expected_verdict(filename: str) -> bool:
    return os.path.basename(filename).startswith("pass")


@dataclass(frozen=True)
class FixtureResult:
    name: str
    expected: bool
    actual: bool

    @property
    def ok(self) -> bool:
        return self.expected == self.actual


@dataclass
class FixtureReport:
    results: List[FixtureResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def pass_rate(self) -> float:
        """Percentage of fixtures whose verdict matched; 0.0 when empty."""
        if not self.results:
            return 0.0
        return self.passed / self.total * 100


def run_fixtures(directory: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT) -> FixtureReport:
    """
    Validate every *.json file in directory, in name order.

    A fixture that cannot be read or decoded as UTF-8 counts as invalid.
    Raises FileNotFoundError if the directory does not exist.
    """
    report = FixtureReport()
    for name in sorted(os.listdir(directory)):
        if not name.endswith(".json"):
            continue
        path = os.path.join(directory, name)
        try:
            with open(path, "r", encoding="utf-8") as fh:
                content = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("%s: unreadable fixture: %s", name, exc)
            actual = False
        else:
            actual = validate(content, max_depth=max_depth)
        result = FixtureResult(name, expected_verdict(name), actual)
        logger.debug("%s: expected %s, got %s", name, result.expected, result.actual)
        report.results.append(result)
    return report


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="json-fixtures", description="Run a directory of JSON fixtures")
    ap.add_argument("directory", help="directory holding pass*.json / fail*.json files")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT)
    ap.add_argument("-v", "--verbose", action="store_true", help="log each rejection reason")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not os.path.isdir(args.directory):
        logger.error("not a directory: %s", args.directory)
        return 2

    print(f"Running fixtures in {args.directory}:")
    report = run_fixtures(args.directory, max_depth=args.max_depth)
    for r in report.results:
        if r.ok:
            print(f"PASS: {r.name}")
        else:
            print(f"FAIL: {r.name} (expected {r.expected}, got {r.actual})")

    print()
    print(f"Total tests: {report.total}")
    print(f"Passed: {report.passed}")
    print(f"Failed: {report.failed}")
    print(f"Pass rate: {report.pass_rate:.2f}%")
    return 0 if report.failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
