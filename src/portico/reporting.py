"""
Text renderings of analyses, benchmark reports and tournament standings.

Responsibilities
  - Render a port analysis as a table summary, CSV or JSON.
  - Render a benchmark report as a comparison table or JSON document.
  - Render tournament standings as a ranked list.

Usage Context
  - Used by the command line; every renderer returns a string.

Limitations
  - Tables are plain fixed-width text without terminal colour.
"""
# 说明：将分析结果、基准报告与锦标赛排名渲染为表格 / CSV / JSON 文本，供命令行输出。
# 职责：
# - render_analysis_table / render_analysis_csv / render_analysis_json
# - render_benchmark_table / render_benchmark_json
# - render_tournament_table
# 约定：
# - 所有渲染函数只返回字符串，不直接写 stdout

from __future__ import annotations

import csv
import io
from typing import Any, List, Sequence

from portico.analysis.benchmark import BenchmarkReport
from portico.analysis.collision import PortAnalysis
from portico.analysis.distribution import birthday_collision_probability
from portico.analysis.tournament import TournamentStandings
from portico.core.utils.serialization import serialize_to_json, with_metadata

RULE = "=" * 60
THIN_RULE = "-" * 60


def _format_rows(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> List[str]:
    # 按列宽对齐的简单文本表格
    cells = [[str(h) for h in headers]] + [[str(c) for c in row] for row in rows]
    widths = [max(len(row[i]) for row in cells) for i in range(len(headers))]
    lines = ["  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip() for row in cells]
    lines.insert(1, "  ".join("-" * w for w in widths))
    return lines


def render_analysis_table(
    analysis: PortAnalysis,
    base_port: int,
    range_size: int,
    hash_name: str,
    reducer_name: str,
) -> str:
    count = analysis.identifier_count
    probability = birthday_collision_probability(count, range_size)
    lines = [
        RULE,
        "Import Map Port Analysis",
        THIN_RULE,
        f"Strategy: {hash_name}+{reducer_name}",
        f"Generating {count} ports in range {base_port} - {base_port + range_size - 1}",
        f"Collision Probability: {probability * 100:.2f}%",
        THIN_RULE,
    ]
    if analysis.unique_port_count < count:
        lines.append(f"Unique ports: {analysis.unique_port_count}")
        lines.append(
            f"Collisions: {analysis.collision_count} packages in {analysis.collision_group_count} collision groups"
        )
        lines.append("Collisions:")
        for port, names in analysis.collision_groups.items():
            lines.append(f"  Port {port}: {', '.join(names)}")
    else:
        lines.append("No collisions detected!")
    lines.append(RULE)
    return "\n".join(lines)


def render_analysis_csv(analysis: PortAnalysis) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(["Package Name", "Port", "Collision Count"])
    for name, port in analysis.entries.items():
        writer.writerow([name, port, len(analysis.collisions_for(name))])
    return buffer.getvalue().rstrip("\n")


def render_analysis_json(analysis: PortAnalysis) -> str:
    return serialize_to_json(analysis)


def render_benchmark_table(report: BenchmarkReport, source: str = "") -> str:
    lines = [RULE]
    if source:
        lines.append(f"Import Map: {source}")
    lines.append(
        f"Range: {report.base_port} - {report.base_port + report.range_size - 1} ({report.range_size} ports)"
    )
    lines.append(f"Collision Probability: {report.collision_probability * 100:.2f}%")
    total = len(report.results)
    if total:
        percent = report.strategies_with_collisions / total * 100
        lines.append(f"Strategies with collisions: {report.strategies_with_collisions} / {total} ({percent:.2f}%)")
    lines.append(THIN_RULE)
    rows = [
        (r.hash_name, r.reducer_name, r.collisions, r.unique_ports, f"{r.utilization * 100:.2f}%")
        for r in report.results
    ]
    lines.extend(_format_rows(("Hash", "Reducer", "Collisions", "Unique Ports", "Utilization"), rows))
    for failure in report.failures:
        lines.append(f"Failed: {failure.hash_name}+{failure.reducer_name} ({failure.error_type}: {failure.message})")

    best, worst = report.best, report.worst
    if best is not None:
        lines.append(THIN_RULE)
        lines.append(f"Best Combination: {best.hash_name} + {best.reducer_name}")
        lines.append(f"  {best.collisions} collisions, {best.unique_ports} unique ports")
        if worst is not None:
            improvement = worst.collisions - best.collisions
            percent = f"{improvement / worst.collisions * 100:.1f}" if improvement > 0 else "0"
            lines.append("Performance Difference:")
            lines.append(f"  {improvement} fewer collisions ({percent}% improvement)")
            lines.append(f"  {best.unique_ports - worst.unique_ports} more unique ports")
    lines.append(RULE)
    return "\n".join(lines)


def render_benchmark_json(report: BenchmarkReport, source: str = "") -> str:
    payload = report.to_dict()
    results = payload.pop("results")
    failures = payload.pop("failures")
    summary = payload.pop("summary")
    document = with_metadata(
        {"results": results, "failures": failures, "summary": summary},
        import_map=source,
        **payload,
    )
    return serialize_to_json(document)


def render_tournament_table(outcome: TournamentStandings) -> str:
    lines = [RULE, f"Strategy Tournament ({outcome.rounds} rounds)", THIN_RULE]
    rows = [
        (
            f"#{position}",
            standing.strategy,
            f"{standing.points:+.1f}",
            f"{standing.average_rank:.1f}",
            standing.top_three_count,
            standing.bottom_three_count,
        )
        for position, standing in enumerate(outcome.standings, start=1)
    ]
    lines.extend(_format_rows(("Pos", "Strategy", "Points", "Avg Rank", "Top 3", "Bottom 3"), rows))
    for failed in outcome.failed_rounds:
        lines.append(f"Failed round: {failed['label']} (range={failed['range_size']}): {failed['message']}")
    champion = outcome.champion
    if champion is not None:
        lines.append(THIN_RULE)
        lines.append(f"Champion: {champion.strategy} ({champion.points:.1f} pts)")
        lines.append(f"Point spread: {outcome.point_spread:.1f} pts")
    lines.append(RULE)
    return "\n".join(lines)
