"""Domain-specific exceptions."""
from .base_exceptions import OrthoPathsException, RoutingError


class GridError(OrthoPathsException):
    """Exception raised for routing grid errors."""
    
    def __init__(self, message: str, grid_bounds: tuple = None, **kwargs):
        """Initialize grid error.
        
        Args:
            message: Error message
            grid_bounds: Grid bounds (width, height) that caused the error
        """
        super().__init__(message, **kwargs)
        self.grid_bounds = grid_bounds


class AlgorithmError(RoutingError):
    """Exception raised when a routing algorithm breaks its own invariants."""
    
    def __init__(self, message: str, algorithm_name: str = None, **kwargs):
        """Initialize algorithm error.
        
        Args:
            message: Error message
            algorithm_name: Name of algorithm that failed
        """
        super().__init__(message, **kwargs)
        self.algorithm_name = algorithm_name
