"""
Social network analytics over a small directed relationship graph:
degree centrality (influence ranking) and breadth-first shortest paths
(degrees of separation).
"""

from .config import Config
from .database import (
    SocialGraph,
    User,
    GraphAnalyzer,
    CentralityReport,
    DegreeMetrics,
    PathFinder,
    PathResult,
    PathStatus,
)

__version__ = "0.1.0"

__all__ = [
    'Config',
    'SocialGraph',
    'User',
    'GraphAnalyzer',
    'CentralityReport',
    'DegreeMetrics',
    'PathFinder',
    'PathResult',
    'PathStatus',
]
