"""
Example 11: Strategy Benchmark.

Goal:
    Compare all fifteen hash + reducer combinations on one import map and
    report the best and worst combinations with their occupancy.

Usage:
    python examples/analysis/11_strategy_benchmark.py --quick
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, import_maps, io
from portico.analysis import StrategyBenchmark
from portico.reporting import render_benchmark_table


def main(argv=None):
    args = cli.parse_args("Strategy Benchmark Demo", argv)

    suite = import_maps.build_import_map_suite(args.seed, quick=args.quick)
    label, imports = next(iter(suite.items()))
    range_size = 200 if args.quick else 997

    report = StrategyBenchmark().run(imports, args.base, range_size)
    print(render_benchmark_table(report, label))

    result = {
        "name": "analysis/11_strategy_benchmark",
        "config": {"seed": args.seed, "quick": args.quick, "import_map": label, "range": range_size},
        "outputs": {"ranking": [r.strategy for r in report.results]},
        "metrics": {
            "best": report.best.strategy,
            "best_collisions": report.best.collisions,
            "worst": report.worst.strategy,
            "worst_collisions": report.worst.collisions,
            "collision_probability": round(report.collision_probability, 4),
        },
        "artifacts": {},
    }
    out_path = io.write_json(report, Path(args.outdir) / "11_strategy_benchmark.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
