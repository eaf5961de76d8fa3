#!/usr/bin/env python3
"""Benchmark script for calltree performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import io
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of calltree package."""
    start = time.perf_counter()
    import calltree  # noqa: F401

    return time.perf_counter() - start


def benchmark_deep_chain(length: int) -> float:
    """Measure walking a single call chain of given length."""
    from calltree import CallGraphBuilder, Method, extract_call_tree

    methods = [Method(name=f"m{i}", declaring_class="bench.Chain") for i in range(length)]
    builder = CallGraphBuilder()
    for i, (caller, callee) in enumerate(zip(methods, methods[1:], strict=False), start=1):
        builder.add_call(caller, callee, line=i)
    graph = builder.freeze()

    start = time.perf_counter()
    extract_call_tree(io.StringIO(), graph, methods[0])
    return time.perf_counter() - start


def benchmark_polymorphic_fan_out(width: int) -> float:
    """Measure walking one call site with many merged dispatch targets."""
    from calltree import CallGraphBuilder, CallTreeConfig, Method, collect_alias_groups
    from calltree import extract_call_tree

    entry = Method(name="main", declaring_class="bench.Main")
    builder = CallGraphBuilder()
    for i in range(width):
        builder.add_call(entry, Method(name="run", declaring_class=f"bench.Impl{i}"), line=3)
    graph = builder.freeze()
    config = CallTreeConfig(edge_class_map=collect_alias_groups(graph))

    start = time.perf_counter()
    extract_call_tree(io.StringIO(), graph, entry, config=config)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run calltree benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": "Deep Chain (10k methods)",
            "unit": "seconds",
            "value": benchmark_deep_chain(10_000),
        },
        {
            "name": "Polymorphic Fan-out (1k targets)",
            "unit": "seconds",
            "value": benchmark_polymorphic_fan_out(1_000),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
