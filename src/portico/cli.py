"""
Command line interface: ``portico generate | analyze | benchmark | tournament``.
"""
# 说明：命令行入口，基于 argparse 提供端口生成、import map 分析、策略基准与锦标赛四个子命令。
# 职责：
# - build_parser：构造带公共参数（--base / --range / --hash / --reducer）的子命令解析器
# - main：解析参数、调用核心接口并按输出格式渲染
# 约定：
# - 选项默认值来自 RuntimeConfig（可被 PORTICO_* 环境变量覆写）
# - 库内异常统一输出为 "Error: <message>" 并返回退出码 1

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from portico import reporting
from portico.analysis.benchmark import StrategyBenchmark
from portico.analysis.tournament import DEFAULT_TOURNAMENT_RANGES, run_tournament
from portico.assignment.port_assigner import compute_port
from portico.core.errors import PorticoError
from portico.core.utils.config import RuntimeConfig, get_config
from portico.core.utils.logging import configure_logging, get_logger
from portico.core.utils.param_validation import ParamValidationError
from portico.core.utils.serialization import serialize_to_json
from portico.hashing.registry import HASH_FUNCTIONS, REDUCERS
from portico.io.sources import analyze_import_map, load_import_map, read_package_name

logger = get_logger(__name__)

HASH_LIST = ", ".join(HASH_FUNCTIONS)
REDUCER_LIST = ", ".join(REDUCERS)


def _parse_ranges(text: str) -> List[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid range list '{text}'") from exc


def _add_bounds(parser: argparse.ArgumentParser, config: RuntimeConfig) -> None:
    parser.add_argument(
        "-b", "--base", type=int, default=config.base_port,
        help=f"Base port number (default: {config.base_port})",
    )
    parser.add_argument(
        "-r", "--range", dest="range_size", type=int, default=config.range_size,
        help=f"Port range size (default: {config.range_size})",
    )


def _add_strategy(parser: argparse.ArgumentParser, config: RuntimeConfig) -> None:
    parser.add_argument(
        "--hash", dest="hash_name", default=config.hash_name,
        help=f"Hash function: {HASH_LIST} (default: {config.hash_name})",
    )
    parser.add_argument(
        "--reducer", dest="reducer_name", default=config.reducer_name,
        help=f"Reducer function: {REDUCER_LIST} (default: {config.reducer_name})",
    )


def build_parser(config: Optional[RuntimeConfig] = None) -> argparse.ArgumentParser:
    config = config or get_config()
    parser = argparse.ArgumentParser(
        prog="portico",
        description="Generate stable, unique development ports based on package name",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: PORTICO_LOG_LEVEL or WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Generate a port from package.json or package name")
    _add_bounds(generate, config)
    _add_strategy(generate, config)
    generate.add_argument("-p", "--package", default=None, help="Path to package.json (default: ./package.json)")
    generate.add_argument("-n", "--name", default=None, help="Package name to calculate port for")

    analyze = sub.add_parser("analyze", help="Analyze import map and generate ports for all entries")
    _add_bounds(analyze, config)
    _add_strategy(analyze, config)
    analyze.add_argument("-i", "--import-map", required=True, help="Path to import map JSON file")
    analyze.add_argument(
        "-o", "--output", choices=["table", "json", "csv"], default=_choice(config.output_format, ("table", "json", "csv")),
        help="Output format (default: table)",
    )

    bench = sub.add_parser("benchmark", help="Compare every hash + reducer combination")
    _add_bounds(bench, config)
    bench.add_argument("-i", "--import-map", required=True, help="Path to import map JSON file")
    bench.add_argument(
        "-o", "--output", choices=["table", "json"], default=_choice(config.output_format, ("table", "json")),
        help="Output format (default: table)",
    )

    tournament = sub.add_parser("tournament", help="Rank strategies across several import maps and ranges")
    tournament.add_argument(
        "-b", "--base", type=int, default=config.base_port,
        help=f"Base port number (default: {config.base_port})",
    )
    tournament.add_argument(
        "-i", "--import-map", dest="import_maps", action="append", required=True,
        help="Path to an import map JSON file; repeat for several maps",
    )
    tournament.add_argument(
        "--ranges", type=_parse_ranges, default=list(DEFAULT_TOURNAMENT_RANGES),
        help="Comma-separated port ranges (default: %s)" % ",".join(str(r) for r in DEFAULT_TOURNAMENT_RANGES),
    )
    tournament.add_argument("-o", "--output", choices=["table", "json"], default="table", help="Output format")
    return parser


def _choice(value: str, allowed: tuple) -> str:
    # 环境变量中的输出格式不在可选范围内时回退为 table
    return value if value in allowed else "table"


def _run(args: argparse.Namespace) -> str:
    if args.command == "generate":
        name = args.name if args.name is not None else read_package_name(args.package)
        return str(compute_port(name, args.base, args.range_size, args.hash_name, args.reducer_name))

    if args.command == "analyze":
        analysis = analyze_import_map(args.import_map, args.base, args.range_size, args.hash_name, args.reducer_name)
        if args.output == "json":
            return reporting.render_analysis_json(analysis)
        if args.output == "csv":
            return reporting.render_analysis_csv(analysis)
        return reporting.render_analysis_table(analysis, args.base, args.range_size, args.hash_name, args.reducer_name)

    if args.command == "benchmark":
        imports = load_import_map(args.import_map)["imports"]
        report = StrategyBenchmark().run(imports, args.base, args.range_size)
        if args.output == "json":
            return reporting.render_benchmark_json(report, args.import_map)
        return reporting.render_benchmark_table(report, args.import_map)

    # tournament
    identifier_sets = {path: load_import_map(path)["imports"] for path in args.import_maps}
    outcome = run_tournament(identifier_sets, args.ranges, args.base)
    if args.output == "json":
        return serialize_to_json(outcome)
    return reporting.render_tournament_table(outcome)


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    try:
        config.load_from_env()
    except ParamValidationError as exc:
        # 环境变量错误发生在参数解析之前，同样按统一格式报告
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    args = build_parser(config).parse_args(argv)
    if args.log_level:
        configure_logging(args.log_level.upper())
    try:
        output = _run(args)
    except (PorticoError, ParamValidationError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
