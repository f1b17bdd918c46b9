"""
Example 01: Team Port Ranges.

Goal:
    Give each kind of service its own port window and assign stable ports
    to the apps of a team inside those windows.

Usage:
    python examples/basic/01_team_config.py
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from portico import analyze, compute_port

TEAM_CONFIG = {
    "angular": {"base": 4200, "range": 200},  # 4200-4399
    "react": {"base": 3000, "range": 200},    # 3000-3199
    "vue": {"base": 8080, "range": 200},      # 8080-8279
    "api": {"base": 5000, "range": 100},      # 5000-5099
}

APPS = [
    ("@company/shell-app", "angular"),
    ("@company/auth-app", "react"),
    ("@company/dashboard-app", "vue"),
    ("@company/user-api", "api"),
    ("@company/product-api", "api"),
]


def port_for(package_name: str, app_type: str) -> int:
    """Port for ``package_name`` inside the window configured for ``app_type``."""
    window = TEAM_CONFIG[app_type]
    return compute_port(package_name, window["base"], window["range"])


def main(argv=None):
    args = cli.parse_args("Team Config Demo", argv)

    assignments = {name: port_for(name, kind) for name, kind in APPS}

    # 同一窗口内的应用才可能发生碰撞，按类型分别检查
    collisions = {}
    for kind, window in TEAM_CONFIG.items():
        names = [name for name, k in APPS if k == kind]
        analysis = analyze(names, window["base"], window["range"])
        collisions[kind] = analysis.collision_count

    for name, kind in APPS:
        print(f"{name.ljust(25)} -> {assignments[name]} ({kind})")

    result = {
        "name": "basic/01_team_config",
        "config": {"windows": TEAM_CONFIG},
        "outputs": {"assignments": assignments},
        "metrics": {"collisions_by_type": collisions},
        "artifacts": {},
    }
    out_path = io.write_json(result, Path(args.outdir) / "01_team_config.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
