from .error_handler import (
    GraphError,
    ValidationError,
    OperationError,
    ConfigurationError,
    CapacityExceededError,
    InvalidEdgeError,
    NodeNotFoundError,
    ErrorTracker,
    handle_errors,
)

__all__ = [
    'GraphError',
    'ValidationError',
    'OperationError',
    'ConfigurationError',
    'CapacityExceededError',
    'InvalidEdgeError',
    'NodeNotFoundError',
    'ErrorTracker',
    'handle_errors',
]
