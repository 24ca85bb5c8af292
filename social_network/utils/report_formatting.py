# utils/report_formatting.py
from typing import List

from ..database.analytics import CentralityReport
from ..database.graph import SocialGraph
from ..database.pathfinding import PathResult, PathStatus

class ReportFormatter:
    """Plain-text rendering of analysis results."""

    @staticmethod
    def format_centrality(report: CentralityReport) -> str:
        """Render the degree table and the most influential user."""
        lines = [
            "--- DEGREE CENTRALITY (Influence Analysis) ---",
            "User\t\tIn-Degree\tOut-Degree\tTotal",
            "---------------------------------------------",
        ]
        for m in report.metrics:
            lines.append(f"{m.name:<10}\t{m.in_degree}\t\t{m.out_degree}\t\t{m.total_degree}")

        if report.most_influential is None:
            lines.append("")
            lines.append("No users in the graph.")
        else:
            top = report.most_influential
            lines.append("")
            lines.append(f"Most Influential User: {top.name} (Total Degree: {top.total_degree})")
        return "\n".join(lines)

    @staticmethod
    def format_path(graph: SocialGraph, result: PathResult) -> str:
        """Render one shortest path query."""
        start = graph.get_user(result.start).name
        target = graph.get_user(result.target).name

        if result.status is PathStatus.SAME_NODE:
            return f"Start and target are the same: {start}"

        lines = [f"--- SHORTEST PATH ({start} → {target}) ---"]
        if result.status is PathStatus.FOUND:
            names = [graph.get_user(i).name for i in result.path]
            lines.append(f"Path found! Distance = {result.distance}")
            lines.append("Path: " + " -> ".join(names))
        else:
            lines.append(f"No path exists between {start} and {target}.")
        return "\n".join(lines)

    @staticmethod
    def format_paths(graph: SocialGraph, results: List[PathResult]) -> str:
        return "\n\n".join(ReportFormatter.format_path(graph, r) for r in results)
