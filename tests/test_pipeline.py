import json

import pytest
import yaml
from click.testing import CliRunner

from social_network.orchestration.cli import cli
from social_network.orchestration.pipeline import (
    Dataset,
    PipelineManager,
    SocialNetworkPipeline,
)
from social_network.database.pathfinding import PathStatus
from social_network.utils.error_handler import CapacityExceededError, NodeNotFoundError, ValidationError

@pytest.fixture
def dataset_path(tmp_path):
    """Small dataset mixing names, ids and one bad relationship."""
    path = tmp_path / "network.yaml"
    path.write_text(yaml.dump({
        'users': ['ann', 'bob', 'cat'],
        'relationships': [['ann', 'bob'], [1, 2], ['bob', 'zed'], [0, 5]],
        'queries': [['ann', 'cat'], ['cat', 'ann'], [1, 1]]
    }))
    return path

def test_sample_network_summary(config_path):
    summary = PipelineManager(config_path).analyze_file()

    assert summary['total_users'] == 8
    assert summary['total_relationships'] == 11
    assert summary['rejected_relationships'] == 0
    assert summary['centrality']['most_influential']['name'] == 'anirudda'
    assert summary['centrality']['most_influential']['total_degree'] == 4
    assert [p['names'] for p in summary['paths']] == [
        ['arijit', 'arge', 'anirudda', 'daverup'],
        ['anirudda', 'daverup', 'prakar', 'prithu'],
        ['arijit'],
        [],
    ]
    assert [p['status'] for p in summary['paths']] == ['found', 'found', 'same_node', 'not_found']

def test_invalid_relationships_are_skipped(test_config, dataset_path):
    result = SocialNetworkPipeline(test_config).run(Dataset.load(dataset_path))

    assert result.graph.relationships() == [(0, 1), (1, 2)]
    assert result.rejected_relationships == 2
    assert result.graph.is_frozen
    assert [p.status for p in result.paths] == [
        PathStatus.FOUND, PathStatus.NOT_FOUND, PathStatus.SAME_NODE
    ]
    assert result.paths[0].path == [0, 1, 2]

def test_capacity_from_config(tmp_path, config_data, dataset_path):
    config_data['graph']['max_users'] = 2
    path = tmp_path / "tiny.yaml"
    path.write_text(yaml.dump(config_data))

    with pytest.raises(CapacityExceededError):
        PipelineManager(path).analyze_file(dataset_path)

def test_unknown_query_user(test_config):
    dataset = Dataset.from_dict({'users': ['ann'], 'queries': [['ann', 'zed']]})

    with pytest.raises(NodeNotFoundError):
        SocialNetworkPipeline(test_config).run(dataset)

@pytest.mark.parametrize('data', [
    ['ann', 'bob'],
    {'relationships': []},
    {'users': ['ann'], 'relationships': [['ann']]},
    {'users': ['ann'], 'queries': ['ann']},
    {'users': 'arijit', 'relationships': [['arijit', 'arijit']]},
])
def test_malformed_dataset(data):
    with pytest.raises(ValidationError):
        Dataset.from_dict(data)

def test_missing_dataset_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Dataset.load(tmp_path / "missing.yaml")

def test_cli_analyze_sample(config_path, tmp_path):
    output = tmp_path / "summary.json"
    runner = CliRunner()
    result = runner.invoke(cli, ['analyze', str(config_path), '--output', str(output)])

    assert result.exit_code == 0, result.output
    assert "anirudda  \t2\t\t2\t\t4" in result.output
    assert "Most Influential User: anirudda (Total Degree: 4)" in result.output
    assert "--- SHORTEST PATH (arijit → daverup) ---" in result.output
    assert "Path found! Distance = 3" in result.output
    assert "Path: arijit -> arge -> anirudda -> daverup" in result.output
    assert "Path: anirudda -> daverup -> prakar -> prithu" in result.output
    assert "Start and target are the same: arijit" in result.output
    assert "No path exists between prithu and arijit." in result.output

    summary = json.loads(output.read_text())
    assert summary['total_relationships'] == 11

def test_cli_analyze_reports_skipped(config_path, dataset_path):
    result = CliRunner().invoke(cli, ['analyze', str(config_path), str(dataset_path)])

    assert result.exit_code == 0, result.output
    assert "Skipped 2 invalid relationships." in result.output

def test_cli_path(config_path):
    result = CliRunner().invoke(cli, ['path', str(config_path), 'anirudda', '7'])

    assert result.exit_code == 0, result.output
    assert "Path: anirudda -> daverup -> prakar -> prithu" in result.output

def test_cli_path_unknown_user(config_path):
    result = CliRunner().invoke(cli, ['path', str(config_path), 'arijit', 'nobody'])

    assert result.exit_code != 0
    assert "node_not_found" in result.output

def test_cli_capacity_error(tmp_path, config_data):
    config_data['graph']['max_users'] = 4
    path = tmp_path / "tiny.yaml"
    path.write_text(yaml.dump(config_data))

    result = CliRunner().invoke(cli, ['analyze', str(path)])

    assert result.exit_code != 0
    assert "capacity_exceeded" in result.output

def test_summary_lists_rejected_relationships(config_path, dataset_path):
    summary = PipelineManager(config_path).analyze_file(dataset_path)

    assert summary['rejected_relationships'] == 2
    assert summary['errors']['error_counts'] == {'invalid_edge_endpoint': 2}
    assert [e['details'] for e in summary['rejected']] == [
        {'from': 'bob', 'to': 'zed'},
        {'from': 0, 'to': 5},
    ]
    assert all(e['type'] == 'InvalidEdgeError' for e in summary['rejected'])
    json.dumps(summary)

def test_numeric_names_resolve_before_ids(tmp_path, config_path):
    path = tmp_path / "numeric.yaml"
    path.write_text(yaml.dump({
        'users': ['bob', '0'],
        'relationships': [['0', 'bob']]
    }))

    result = CliRunner().invoke(cli, ['path', str(config_path), '0', '0', '--dataset', str(path)])
    assert "Start and target are the same: 0" in result.output

    result = CliRunner().invoke(cli, ['path', str(config_path), '0', 'bob', '--dataset', str(path)])
    assert result.exit_code == 0, result.output
    assert "Path: 0 -> bob" in result.output
