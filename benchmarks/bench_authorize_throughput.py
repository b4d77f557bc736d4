"""Benchmark: rule chain evaluation throughput in authorizations per second.

Measures how many RuleChain.check() calls complete per second against a
chain of a few hundred rules, with targets that are decided early, late,
and by the default-deny.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from permstring.permissions.evaluator import RuleChain
from permstring.permissions.permission import Permission

_ITERATIONS: int = 10_000
_SERVICES: int = 50


def _make_chain() -> RuleChain:
    """Build a realistic multi-service rule chain for benchmarking."""
    rules: list[str] = []
    for index in range(_SERVICES):
        service = f"svc{index}"
        rules.append(f"-:{service}:admin:*:delete")
        rules.append(f"+:{service}:admin:users")
        rules.append(f"-:{service}:admin")
        rules.append(f"+:{service}:*:read")
    return RuleChain.from_strings(rules)


def bench_authorize_throughput() -> dict[str, object]:
    """Benchmark RuleChain.check() throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p99_latency_ms.
    """
    chain = _make_chain()
    targets = [
        Permission.parse("svc0:admin:users:list"),
        Permission.parse(f"svc{_SERVICES - 1}:reports:read"),
        Permission.parse("unknown:path"),
    ]

    latencies: list[float] = []
    start = time.perf_counter()
    for iteration in range(_ITERATIONS):
        target = targets[iteration % len(targets)]
        call_start = time.perf_counter()
        chain.check(target)
        latencies.append(time.perf_counter() - call_start)
    total = time.perf_counter() - start

    latencies.sort()
    p99 = latencies[int(len(latencies) * 0.99) - 1]

    result: dict[str, object] = {
        "operation": "authorize_throughput",
        "iterations": _ITERATIONS,
        "rule_count": chain.rule_count,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
        "p99_latency_ms": round(p99 * 1000, 4),
    }
    print(
        f"[bench_authorize_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_authorize_throughput()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "throughput_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
