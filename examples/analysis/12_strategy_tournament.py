"""
Example 12: Comprehensive Strategy Tournament.

Goal:
    Benchmark every strategy over import maps of 73, 133 and 287 entries and
    a list of prime and round port ranges, awarding points by rank in each
    round, then print the overall standings.

Usage:
    python examples/analysis/12_strategy_tournament.py
    python examples/analysis/12_strategy_tournament.py --quick
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
from portico.analysis import DEFAULT_TOURNAMENT_RANGES, run_tournament
from portico.reporting import render_tournament_table


def main(argv=None):
    args = cli.parse_args("Strategy Tournament Demo", argv)

    suite = import_maps.build_import_map_suite(args.seed, quick=args.quick)
    ranges = [997, 1000, 1997] if args.quick else list(DEFAULT_TOURNAMENT_RANGES)

    standings = run_tournament(suite, ranges, args.base)
    print(render_tournament_table(standings))

    champion = standings.champion
    result = {
        "name": "analysis/12_strategy_tournament",
        "config": {
            "seed": args.seed,
            "quick": args.quick,
            "import_maps": {label: len(imports) for label, imports in suite.items()},
            "ranges": ranges,
        },
        "metrics": {
            "rounds": standings.rounds,
            "champion": champion.strategy,
            "champion_points": round(champion.points, 2),
            "point_spread": round(standings.point_spread, 2),
        },
        "artifacts": {},
    }
    out_path = io.write_json(standings, Path(args.outdir) / "12_strategy_tournament.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
