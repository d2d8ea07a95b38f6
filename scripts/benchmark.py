#!/usr/bin/env python3
"""Benchmark script for filterkit performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of filterkit package."""
    start = time.perf_counter()
    import filterkit  # noqa: F401

    return time.perf_counter() - start


def benchmark_construction() -> float:
    """Measure construction time of records and predicate trees."""
    from filterkit import Email, and_, body_contains, not_, recipient_is, subject_contains

    start = time.perf_counter()
    for _ in range(10000):
        Email.create("a@x.com", ["b@x.com"], "50% discount", "contains N95 masks")
        and_(
            subject_contains("discount"),
            and_(body_contains("N95"), not_(recipient_is("john@doe.com"))),
        )
    return time.perf_counter() - start


def benchmark_evaluation() -> float:
    """Measure evaluation time of a small filter."""
    from filterkit import Email, and_, body_contains, evaluate, not_, recipient_is, subject_contains

    email = Email.create("a@x.com", ["b@x.com"], "50% discount", "contains N95 masks")
    spam = and_(
        subject_contains("discount"),
        and_(body_contains("N95"), not_(recipient_is("john@doe.com"))),
    )

    start = time.perf_counter()
    for _ in range(10000):
        evaluate(spam, email)
    return time.perf_counter() - start


def benchmark_deep_tree() -> float:
    """Measure evaluation of a 10k-deep derived disjunction."""
    from filterkit import Email, any_of, evaluate, sender_is

    tree = any_of(sender_is(f"u{i}@x.com") for i in range(10000))
    email = Email.create("u9999@x.com", [])

    start = time.perf_counter()
    evaluate(tree, email)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run filterkit benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = []

    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        }
    )
    results.append(
        {
            "name": "Construction (10k iterations)",
            "unit": "seconds",
            "value": benchmark_construction(),
        }
    )
    results.append(
        {
            "name": "Evaluation (10k iterations)",
            "unit": "seconds",
            "value": benchmark_evaluation(),
        }
    )
    results.append(
        {
            "name": "Deep Tree Evaluation (10k atoms)",
            "unit": "seconds",
            "value": benchmark_deep_tree(),
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
