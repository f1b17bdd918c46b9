"""
Example 13: Evaluating a Custom Hash.

Goal:
    Register an experimental hash next to the built-in ones and let the
    benchmark rank it against them without touching the default tables.

Usage:
    python examples/analysis/13_custom_strategy.py --quick
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

import numpy as np

from examples._shared import cli, import_maps, io
from portico.analysis import StrategyBenchmark
from portico.hashing import HASH_FUNCTIONS, build_hash_table, prime_mix

FNV_PRIMES = (16777619,)


def fnv_like(name: str) -> int:
    # 单一 FNV 素数的乘加折叠（非标准 FNV-1a，只用于对比）
    return prime_mix(name, FNV_PRIMES)


def main(argv=None):
    args = cli.parse_args("Custom Strategy Demo", argv)

    rng = np.random.default_rng(args.seed)
    imports = import_maps.build_import_map(40 if args.quick else 133, rng)
    range_size = 250 if args.quick else 1009

    hashes = build_hash_table({**HASH_FUNCTIONS, "fnv": fnv_like})
    report = StrategyBenchmark(hashes=hashes).run(imports, args.base, range_size)
    positions = {r.strategy: i for i, r in enumerate(report.results, start=1)}
    custom = {k: v for k, v in positions.items() if k.startswith("fnv+")}

    result = {
        "name": "analysis/13_custom_strategy",
        "config": {"seed": args.seed, "entries": len(imports), "range": range_size},
        "outputs": {"custom_positions": custom},
        "metrics": {
            "combinations": len(report.results),
            "best": report.best.strategy,
            "failures": len(report.failures),
        },
        "artifacts": {},
    }
    out_path = io.write_json(result, Path(args.outdir) / "13_custom_strategy.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
