"""
Example 10: Import Map Collision Analysis.

Goal:
    Write a synthetic import map to disk, analyze it with the default
    strategy, and render the same table, CSV and JSON the command line prints.

Usage:
    python examples/analysis/10_import_map_collisions.py --seed 7 --quick
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
from portico.analysis import occupancy_stats
from portico.io import analyze_import_map
from portico.reporting import render_analysis_csv, render_analysis_table


def main(argv=None):
    args = cli.parse_args("Import Map Collision Demo", argv)

    size = 30 if args.quick else import_maps.SIZES["medium"]
    range_size = 200 if args.quick else 1997
    rng = np.random.default_rng(args.seed)
    imports = import_maps.build_import_map(size, rng)

    outdir = io.ensure_outdir(args.outdir)
    map_path = io.write_import_map(imports, outdir / "10_importmap.json")

    analysis = analyze_import_map(map_path, args.base, range_size)
    stats = occupancy_stats(analysis, args.base, range_size)
    print(render_analysis_table(analysis, args.base, range_size, "twin", "knuth"))

    csv_path = outdir / "10_ports.csv"
    csv_path.write_text(render_analysis_csv(analysis) + "\n", encoding="utf-8")

    result = {
        "name": "analysis/10_import_map_collisions",
        "config": {"seed": args.seed, "quick": args.quick, "entries": size, "range": range_size},
        "outputs": {"collision_groups": {str(p): names for p, names in analysis.collision_groups.items()}},
        "metrics": {
            "unique_ports": analysis.unique_port_count,
            "collisions": analysis.collision_count,
            "max_load": stats.max_load,
            "expected_unique": round(stats.expected_unique, 2),
        },
        "artifacts": {"import_map": str(map_path), "csv": str(csv_path)},
    }
    out_path = io.write_json(result, outdir / "10_import_map_collisions.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
