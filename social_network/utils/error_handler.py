# utils/error_handler.py
from typing import Optional, Dict, Any, List
import logging
import traceback
from functools import wraps
from datetime import datetime

class GraphError(Exception):
    """Base class for graph-related errors."""
    def __init__(self, message: str, error_code: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
        self.timestamp = datetime.now()

class ValidationError(GraphError):
    """Error raised for validation failures."""
    pass

class OperationError(GraphError):
    """Error raised for operation failures."""
    pass

class ConfigurationError(GraphError):
    """Error raised for configuration-related failures."""
    pass

class CapacityExceededError(ValidationError):
    """Raised when a graph is constructed with more users than it can hold."""
    def __init__(self, requested: int, capacity: int):
        super().__init__(
            f"Too many users! Max allowed = {capacity}",
            'capacity_exceeded',
            {'requested': requested, 'capacity': capacity}
        )

class InvalidEdgeError(ValidationError):
    """Describes a relationship whose endpoints are not users of the graph."""
    def __init__(self, from_id: Any, to_id: Any):
        super().__init__(
            f"Invalid relationship between {from_id} and {to_id}.",
            'invalid_edge_endpoint',
            {'from': from_id, 'to': to_id}
        )

class NodeNotFoundError(ValidationError):
    """Raised when a query references a user id outside the graph."""
    def __init__(self, node_id: Any, num_users: int):
        super().__init__(
            f"User {node_id} does not exist (graph has {num_users} users)",
            'node_not_found',
            {'node_id': node_id, 'num_users': num_users}
        )

def handle_errors(logger: Optional[logging.Logger] = None,
                 raise_error: bool = True,
                 default_value: Any = None):
    """
    Decorator for handling errors in functions.
    Args:
        logger: Logger instance for error logging
        raise_error: Whether to raise the error or return default value
        default_value: Value to return if error occurs and raise_error is False
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except GraphError as e:
                if logger:
                    logger.error(
                        f"GraphError in {func.__name__}: {str(e)}",
                        extra={
                            'error_code': e.error_code,
                            'details': e.details
                        }
                    )
                if raise_error:
                    raise
                return default_value
            except Exception as e:
                if logger:
                    logger.error(
                        f"Unexpected error in {func.__name__}: {str(e)}",
                        extra={
                            'error_code': 'unexpected_error',
                            'details': {
                                'type': type(e).__name__,
                                'args': str(e.args)
                            },
                            'traceback': traceback.format_exc()
                        }
                    )
                if raise_error:
                    raise GraphError(
                        f"Unexpected error in {func.__name__}: {str(e)}",
                        'unexpected_error',
                        {
                            'original_error': type(e).__name__,
                            'original_message': str(e)
                        }
                    ) from e
                return default_value
        return wrapper
    return decorator

class ErrorTracker:
    """Keeps the errors that were reported rather than raised."""

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []
        self.error_counts: Dict[str, int] = {}

    def track_error(self, error: GraphError):
        """Track an error occurrence."""
        self.errors.append(error_to_dict(error))
        self.error_counts[error.error_code] = self.error_counts.get(error.error_code, 0) + 1

    def get_error_statistics(self) -> Dict[str, Any]:
        """Get error statistics."""
        return {
            'total_errors': len(self.errors),
            'error_counts': dict(self.error_counts),
            'latest_error': self.errors[-1] if self.errors else None
        }

    def clear_errors(self):
        """Clear error history."""
        self.errors = []
        self.error_counts = {}

    def __len__(self) -> int:
        return len(self.errors)

def format_error_message(error: GraphError) -> str:
    """Format error message with details."""
    message = f"Error: {str(error)} (Code: {error.error_code})"

    if error.details:
        message += "\nDetails:"
        for key, value in error.details.items():
            message += f"\n  {key}: {value}"

    return message

def error_to_dict(error: GraphError) -> Dict[str, Any]:
    """Convert error to dictionary format."""
    return {
        'message': str(error),
        'error_code': error.error_code,
        'details': error.details,
        'timestamp': error.timestamp.isoformat(),
        'type': type(error).__name__
    }
