"""Shared exceptions for orthopaths."""
from .base_exceptions import (
    OrthoPathsException, ConfigurationError, ValidationError, RoutingError
)
from .domain_exceptions import GridError, AlgorithmError

__all__ = [
    'OrthoPathsException', 'ConfigurationError', 'ValidationError', 'RoutingError',
    'GridError', 'AlgorithmError'
]
