from .graph import SocialGraph, User
from .analytics import GraphAnalyzer, CentralityReport, DegreeMetrics
from .pathfinding import PathFinder, PathResult, PathStatus

__all__ = [
    'SocialGraph',
    'User',
    'GraphAnalyzer',
    'CentralityReport',
    'DegreeMetrics',
    'PathFinder',
    'PathResult',
    'PathStatus',
]
