# orchestration/pipeline.py
from pathlib import Path
from typing import List, Dict, Any, Optional, Union, Tuple
import logging
from dataclasses import dataclass, field
import time

import yaml

from ..config import Config
from ..database.graph import SocialGraph
from ..database.analytics import GraphAnalyzer, CentralityReport
from ..database.pathfinding import PathFinder, PathResult
from ..utils.error_handler import ValidationError, NodeNotFoundError, handle_errors

DEFAULT_DATASET = Path(__file__).resolve().parent.parent / 'data' / 'sample_network.yaml'

Endpoint = Union[int, str]

@dataclass
class Dataset:
    """Users, relationships and path queries to analyse."""
    users: List[str]
    relationships: List[Tuple[Endpoint, Endpoint]] = field(default_factory=list)
    queries: List[Tuple[Endpoint, Endpoint]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Dataset':
        if not isinstance(data, dict) or 'users' not in data:
            raise ValidationError(
                "Dataset must be a mapping with a 'users' list",
                'invalid_dataset',
                {'keys': sorted(data) if isinstance(data, dict) else None}
            )
        users = data['users']
        if users is None:
            users = []
        if not isinstance(users, list):
            raise ValidationError(
                f"'users' must be a list of names, got {users!r}",
                'invalid_dataset',
                {'key': 'users', 'entry': users}
            )
        return cls(
            users=users,
            relationships=cls._pairs(data.get('relationships'), 'relationships'),
            queries=cls._pairs(data.get('queries'), 'queries')
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'Dataset':
        """Load a dataset from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dataset file not found at {path}")
        with open(path, 'r') as f:
            return cls.from_dict(yaml.safe_load(f))

    @staticmethod
    def _pairs(items: Optional[List[Any]], key: str) -> List[Tuple[Endpoint, Endpoint]]:
        pairs = []
        for item in items or []:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise ValidationError(
                    f"Each entry of '{key}' must be a pair, got {item!r}",
                    'invalid_dataset',
                    {'key': key, 'entry': item}
                )
            pairs.append((item[0], item[1]))
        return pairs

@dataclass
class AnalysisResult:
    """Container for the results of one pipeline run."""
    graph: SocialGraph
    centrality: CentralityReport
    paths: List[PathResult]
    rejected_relationships: int = 0
    processing_time: float = 0.0

class SocialNetworkPipeline:
    """Builds a graph from a dataset and runs the analyses on it."""

    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

    def build_graph(self, dataset: Dataset) -> SocialGraph:
        """Construct the graph, insert every relationship and freeze it."""
        graph = SocialGraph.from_config(self.config, dataset.users)

        for source, target in dataset.relationships:
            if isinstance(source, str) and isinstance(target, str):
                graph.add_relationship_by_name(source, target)
            else:
                graph.add_relationship(source, target)

        if len(graph.errors):
            self.logger.warning(f"Skipped {len(graph.errors)} invalid relationships")

        return graph.freeze()

    def resolve(self, graph: SocialGraph, endpoint: Endpoint) -> int:
        """Map a user name or id to a user id. Names win over numeric strings."""
        if isinstance(endpoint, str):
            node_id = graph.index_of(endpoint)
            if node_id is None and endpoint.isdigit():
                return graph.get_user(int(endpoint)).id
            if node_id is None:
                raise NodeNotFoundError(endpoint, graph.num_users)
            return node_id
        return graph.get_user(endpoint).id

    @handle_errors(logger=logging.getLogger(__name__))
    def run(self, dataset: Dataset) -> AnalysisResult:
        start_time = time.time()

        graph = self.build_graph(dataset)
        centrality = GraphAnalyzer(graph).compute_degree_centrality()

        finder = PathFinder(graph)
        paths = [
            finder.find_shortest_path(self.resolve(graph, s), self.resolve(graph, t))
            for s, t in dataset.queries
        ]

        processing_time = time.time() - start_time
        self.logger.info(f"Analysis completed in {processing_time:.4f} seconds")

        return AnalysisResult(
            graph=graph,
            centrality=centrality,
            paths=paths,
            rejected_relationships=len(graph.errors),
            processing_time=processing_time
        )

class PipelineManager:
    """Manages pipeline execution and provides high-level interface."""

    def __init__(self, config_path: Union[str, Path]):
        self.config = Config(config_path)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.pipeline = SocialNetworkPipeline(self.config)

    def run_file(self, dataset_path: Union[str, Path, None] = None) -> AnalysisResult:
        """Run the pipeline on a dataset file, the bundled sample by default."""
        dataset_path = Path(dataset_path) if dataset_path else DEFAULT_DATASET
        self.logger.info(f"Analyzing dataset: {dataset_path}")
        return self.pipeline.run(Dataset.load(dataset_path))

    def analyze_file(self, dataset_path: Union[str, Path, None] = None) -> Dict[str, Any]:
        """Run the pipeline on a dataset file and summarise the results."""
        return self.prepare_summary(self.run_file(dataset_path))

    def prepare_summary(self, result: AnalysisResult) -> Dict[str, Any]:
        """Prepare summary of analysis results."""
        graph = result.graph
        return {
            'total_users': graph.num_users,
            'total_relationships': graph.edge_count,
            'rejected_relationships': result.rejected_relationships,
            'errors': graph.errors.get_error_statistics(),
            'rejected': [dict(e) for e in graph.errors.errors],
            'users': [user.name for user in graph.users],
            'centrality': result.centrality.to_dict(),
            'paths': [
                dict(p.to_dict(), names=[graph.get_user(i).name for i in p.path])
                for p in result.paths
            ],
            'processing_time': result.processing_time
        }
