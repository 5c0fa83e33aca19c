#!/usr/bin/env python3
"""Benchmark script for methodcheck performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

ITERATIONS = 10000

SPECS = (
    "foo",
    "public function foo",
    "!abstract final !private static function foo",
)


def benchmark_import_time() -> float:
    """Measure import time of methodcheck package."""
    start = time.perf_counter()
    import methodcheck  # noqa: F401

    return time.perf_counter() - start


def benchmark_parse() -> float:
    """Measure parsing time of specification strings."""
    from methodcheck.application.services.parser import MethodSpecParser

    parser = MethodSpecParser()
    start = time.perf_counter()
    for _ in range(ITERATIONS):
        for spec in SPECS:
            parser.parse(spec)
    return time.perf_counter() - start


def benchmark_match() -> float:
    """Measure predicate evaluation time against a class with the method."""
    from methodcheck.application.constraints.has_method import HasMethod

    class Subject:
        @staticmethod
        def foo() -> None:
            pass

    predicate = HasMethod.create("public static function foo")
    start = time.perf_counter()
    for _ in range(ITERATIONS):
        predicate.matches(Subject)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run methodcheck benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"Parse ({ITERATIONS // 1000}k x {len(SPECS)} specs)",
            "unit": "seconds",
            "value": benchmark_parse(),
        },
        {
            "name": f"Match ({ITERATIONS // 1000}k iterations)",
            "unit": "seconds",
            "value": benchmark_match(),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
