# database/analytics.py
from typing import Dict, List, Any, Optional, Tuple
import logging
from dataclasses import dataclass, asdict, field

import numpy as np

from .graph import SocialGraph

@dataclass
class DegreeMetrics:
    """Container for node-level degree metrics."""
    node_id: int
    name: str
    in_degree: int
    out_degree: int
    total_degree: int
    degree_centrality: float

@dataclass
class CentralityReport:
    """Degree table in user id order plus the most influential user."""
    metrics: List[DegreeMetrics] = field(default_factory=list)
    most_influential: Optional[DegreeMetrics] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'metrics': [asdict(m) for m in self.metrics],
            'most_influential': asdict(self.most_influential) if self.most_influential else None
        }

class GraphAnalyzer:
    """Computes degree centrality over a SocialGraph."""

    def __init__(self, graph: SocialGraph):
        self.graph = graph
        self.logger = logging.getLogger(self.__class__.__name__)

    def compute_degree_centrality(self) -> CentralityReport:
        """
        Compute in, out and total degree for every user.
        The most influential user is the first one, in id order, that
        reaches the highest total degree.
        """
        try:
            n = self.graph.num_users
            if n == 0:
                return CentralityReport()

            adjacency = self.graph.adjacency_matrix()
            in_degrees = adjacency.sum(axis=0)
            out_degrees = adjacency.sum(axis=1)
            totals = in_degrees + out_degrees

            # Same normalisation as networkx.degree_centrality
            scale = 1.0 / (n - 1) if n > 1 else None

            metrics = []
            for user in self.graph.users:
                i = user.id
                total = int(totals[i])
                metrics.append(DegreeMetrics(
                    node_id=i,
                    name=user.name,
                    in_degree=int(in_degrees[i]),
                    out_degree=int(out_degrees[i]),
                    total_degree=total,
                    degree_centrality=total * scale if scale is not None else 1.0
                ))

            # argmax returns the first index holding the maximum
            top = int(np.argmax(totals))
            report = CentralityReport(metrics=metrics, most_influential=metrics[top])

            self.logger.info(
                f"Most influential user: {report.most_influential.name} "
                f"(total degree {report.most_influential.total_degree})"
            )
            return report

        except Exception as e:
            self.logger.error(f"Error computing degree centrality: {str(e)}")
            raise

    def get_node_importance_ranking(self) -> List[Tuple[str, int]]:
        """Users sorted by total degree, descending. Ties keep id order."""
        report = self.compute_degree_centrality()
        scores = [(m.name, m.total_degree) for m in report.metrics]
        scores.sort(key=lambda x: x[1], reverse=True)
        return scores
