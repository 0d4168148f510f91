"""Shared utilities."""
from .logging_utils import setup_logging, init_logging, get_logger
from .validation_utils import (
    validate_grid_point, validate_path_count, parse_grid_point, parse_seed
)
from .performance_utils import timing_context, memory_profiler

__all__ = [
    'setup_logging', 'init_logging', 'get_logger',
    'validate_grid_point', 'validate_path_count', 'parse_grid_point', 'parse_seed',
    'timing_context', 'memory_profiler'
]
