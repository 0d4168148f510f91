"""Validation utilities for orthopaths."""
import re
from typing import Tuple

from ..exceptions import ValidationError

_POINT_PATTERN = re.compile(r'^\s*(-?\d+)\s*[,\s]\s*(-?\d+)\s*$')


def validate_grid_point(x: int, y: int, width: int, height: int) -> None:
    """Validate a cell coordinate against grid dimensions.
    
    Args:
        x: Column index
        y: Row index
        width: Grid width in cells
        height: Grid height in cells
        
    Raises:
        ValidationError: If the coordinate is not an in-bounds integer pair
    """
    if not isinstance(x, int) or isinstance(x, bool):
        raise ValidationError(f"X coordinate must be integer, got {type(x)}", field="x", value=x)
    
    if not isinstance(y, int) or isinstance(y, bool):
        raise ValidationError(f"Y coordinate must be integer, got {type(y)}", field="y", value=y)
    
    if not 0 <= x < width:
        raise ValidationError(
            f"X coordinate {x} out of bounds [0, {width - 1}]",
            field="x", value=x
        )
    
    if not 0 <= y < height:
        raise ValidationError(
            f"Y coordinate {y} out of bounds [0, {height - 1}]",
            field="y", value=y
        )


def validate_path_count(path_count: int) -> None:
    """Validate the requested number of disjoint paths.
    
    Raises:
        ValidationError: If the count is not a non-negative integer
    """
    if not isinstance(path_count, int) or isinstance(path_count, bool):
        raise ValidationError(
            f"Path count must be integer, got {type(path_count)}",
            field="path_count", value=path_count
        )
    
    if path_count < 0:
        raise ValidationError(
            f"Path count must be non-negative, got {path_count}",
            field="path_count", value=path_count
        )


def parse_grid_point(text: str) -> Tuple[int, int]:
    """Parse "x,y" or "x y" into an integer pair.
    
    Raises:
        ValidationError: If the text is not two integers
    """
    match = _POINT_PATTERN.match(text or "")
    if not match:
        raise ValidationError(f"Expected 'x,y' coordinate, got {text!r}", field="point", value=text)
    return int(match.group(1)), int(match.group(2))


def parse_seed(text: str) -> int:
    """Parse a wall layout seed.
    
    Raises:
        ValidationError: If the text is not a non-negative integer
    """
    try:
        seed = int(text)
    except (TypeError, ValueError):
        raise ValidationError(f"Seed must be an integer, got {text!r}", field="seed", value=text)
    
    if seed < 0:
        raise ValidationError(f"Seed must be non-negative, got {seed}", field="seed", value=seed)
    return seed
