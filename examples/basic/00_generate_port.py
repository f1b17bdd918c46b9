"""
Example 00: Generate a Port for a Package.

Goal:
    Show the default strategy, explicit strategies, and reading the name
    from a package.json file.

Usage:
    python examples/basic/00_generate_port.py --outdir ./_outputs
"""
import json
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from portico import HASH_FUNCTIONS, REDUCERS, compute_port, get_port_from_package_json


def main(argv=None):
    args = cli.parse_args("Generate Port Demo", argv)

    # 1. Default strategy (twin + knuth over 3001-4997)
    name = "@company/shell-app"
    default_port = compute_port(name, args.base)

    # 2. Every registered strategy for the same name
    by_strategy = {
        f"{h}+{r}": compute_port(name, args.base, 1997, h, r)
        for h in HASH_FUNCTIONS
        for r in REDUCERS
    }

    # 3. package.json lookup
    outdir = io.ensure_outdir(args.outdir)
    package_json = outdir / "package.json"
    package_json.write_text(json.dumps({"name": name, "version": "0.0.0"}), encoding="utf-8")
    from_file = get_port_from_package_json(package_json, args.base)

    result = {
        "name": "basic/00_generate_port",
        "config": {"package": name, "base": args.base, "range": 1997},
        "outputs": {"by_strategy": by_strategy},
        "metrics": {
            "default_port": default_port,
            "package_json_port": from_file,
            "distinct_ports_across_strategies": len(set(by_strategy.values())),
        },
        "artifacts": {},
    }
    assert default_port == from_file

    out_path = io.write_json(result, outdir / "00_generate_port.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
