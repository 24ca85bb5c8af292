import random
from pathlib import Path
from typing import Dict, Any, List, Tuple

import pytest
import yaml

from social_network.config import Config
from social_network.database.graph import SocialGraph

@pytest.fixture
def config_data() -> Dict[str, Any]:
    return {
        'graph': {
            'max_users': 8,
            'max_name_length': 19
        },
        'logging': {
            'level': 'DEBUG',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }
    }

@pytest.fixture
def config_path(tmp_path: Path, config_data: Dict[str, Any]) -> Path:
    """Write the test configuration to a temporary YAML file."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump(config_data))
    return path

@pytest.fixture
def test_config(config_path: Path) -> Config:
    """Create test configuration."""
    return Config(config_path)

@pytest.fixture
def sample_users() -> List[str]:
    return ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'H']

@pytest.fixture
def sample_relationships() -> List[Tuple[int, int]]:
    return [
        (0, 1), (0, 2), (1, 3), (2, 3), (3, 0), (3, 5),
        (4, 5), (5, 6), (6, 7), (7, 6), (2, 4)
    ]

@pytest.fixture
def sample_graph(sample_users, sample_relationships) -> SocialGraph:
    """The eight-user reference network, frozen."""
    graph = SocialGraph(sample_users)
    for source, target in sample_relationships:
        assert graph.add_relationship(source, target)
    return graph.freeze()

def make_random_graph(seed: int, capacity: int = 8) -> SocialGraph:
    """Random directed graph with up to ``capacity`` users."""
    rng = random.Random(seed)
    n = rng.randint(1, capacity)
    graph = SocialGraph([f"u{i}" for i in range(n)], capacity=capacity)
    density = rng.choice([0.1, 0.25, 0.5])
    for i in range(n):
        for j in range(n):
            if rng.random() < density:
                graph.add_relationship(i, j)
    return graph.freeze()

@pytest.fixture(params=range(25))
def random_graph(request) -> SocialGraph:
    return make_random_graph(request.param)
