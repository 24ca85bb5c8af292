import logging

import pytest

from social_network.database.analytics import CentralityReport
from social_network.utils.error_handler import (
    ErrorTracker,
    GraphError,
    InvalidEdgeError,
    ValidationError,
    error_to_dict,
    format_error_message,
    handle_errors,
)
from social_network.utils.report_formatting import ReportFormatter

def test_handle_errors_wraps_unexpected_exceptions():
    @handle_errors(logger=logging.getLogger(__name__))
    def broken():
        raise KeyError('missing')

    with pytest.raises(GraphError) as exc_info:
        broken()
    assert exc_info.value.error_code == 'unexpected_error'
    assert exc_info.value.details['original_error'] == 'KeyError'

def test_handle_errors_reraises_graph_errors():
    @handle_errors()
    def invalid():
        raise ValidationError("bad", 'invalid_input')

    with pytest.raises(ValidationError):
        invalid()

def test_handle_errors_default_value():
    @handle_errors(raise_error=False, default_value=[])
    def broken():
        raise RuntimeError("boom")

    assert broken() == []

def test_error_tracker():
    tracker = ErrorTracker()
    tracker.track_error(InvalidEdgeError(0, 9))
    tracker.track_error(InvalidEdgeError(9, 0))

    stats = tracker.get_error_statistics()
    assert stats['total_errors'] == 2
    assert stats['error_counts'] == {'invalid_edge_endpoint': 2}
    assert stats['latest_error']['details'] == {'from': 9, 'to': 0}

    tracker.clear_errors()
    assert len(tracker) == 0

def test_error_formatting():
    error = InvalidEdgeError(1, 8)

    message = format_error_message(error)
    assert message.startswith("Error: Invalid relationship between 1 and 8. (Code: invalid_edge_endpoint)")
    assert "  to: 8" in message

    as_dict = error_to_dict(error)
    assert as_dict['type'] == 'InvalidEdgeError'
    assert as_dict['error_code'] == 'invalid_edge_endpoint'

def test_format_empty_centrality():
    text = ReportFormatter.format_centrality(CentralityReport())
    assert text.endswith("No users in the graph.")
