"""Application settings dataclasses."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


# Shortest (first) path is the darkest blue, later paths get lighter
DEFAULT_PATH_COLORS: List[Tuple[int, int, int]] = [
    (2, 136, 209),
    (41, 182, 246),
    (129, 212, 250),
    (179, 229, 252),
    (224, 247, 250),
]


@dataclass
class GridSettings:
    """Grid dimensions and random wall layout."""
    width: int = 20
    height: int = 15
    wall_probability: float = 0.25
    seed: Optional[int] = None

    def validate(self) -> List[str]:
        errors = []
        if self.width <= 0:
            errors.append(f"width must be positive, got {self.width}")
        if self.height <= 0:
            errors.append(f"height must be positive, got {self.height}")
        if not 0.0 <= self.wall_probability <= 1.0:
            errors.append(f"wall_probability must be in [0, 1], got {self.wall_probability}")
        if self.seed is not None and self.seed < 0:
            errors.append(f"seed must be non-negative, got {self.seed}")
        return errors


@dataclass
class RoutingSettings:
    """Disjoint path routing settings."""
    path_count: int = 5

    def validate(self) -> List[str]:
        errors = []
        if self.path_count < 0:
            errors.append(f"path_count must be non-negative, got {self.path_count}")
        return errors


@dataclass
class DisplaySettings:
    """Colours and cell size used by the presentation layer."""
    cell_size: int = 40
    empty_color: Tuple[int, int, int] = (200, 200, 200)
    wall_color: Tuple[int, int, int] = (50, 50, 50)
    start_color: Tuple[int, int, int] = (0, 255, 0)
    end_color: Tuple[int, int, int] = (255, 0, 0)
    path_colors: List[Tuple[int, int, int]] = field(
        default_factory=lambda: list(DEFAULT_PATH_COLORS)
    )

    def validate(self) -> List[str]:
        errors = []
        if self.cell_size <= 0:
            errors.append(f"cell_size must be positive, got {self.cell_size}")
        if not self.path_colors:
            errors.append("path_colors must contain at least one colour")
        colors = [self.empty_color, self.wall_color, self.start_color,
                  self.end_color, *self.path_colors]
        for color in colors:
            if len(color) != 3 or any(not 0 <= channel <= 255 for channel in color):
                errors.append(f"invalid RGB colour: {color}")
        return errors


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True
    file_output: bool = False
    log_file: str = "logs/orthopaths.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    component_levels: Dict[str, str] = field(default_factory=dict)

    def validate(self) -> List[str]:
        errors = []
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level.upper() not in valid_levels:
            errors.append(f"invalid log level: {self.level}")
        for component, level in self.component_levels.items():
            if level.upper() not in valid_levels:
                errors.append(f"invalid log level for {component}: {level}")
        if self.max_file_size_mb <= 0:
            errors.append(f"max_file_size_mb must be positive, got {self.max_file_size_mb}")
        return errors


@dataclass
class ApplicationSettings:
    """Top-level settings container."""
    version: str = "1.0.0"
    config_version: int = 1
    grid: GridSettings = field(default_factory=GridSettings)
    routing: RoutingSettings = field(default_factory=RoutingSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def validate(self) -> Dict[str, List[str]]:
        """Validate all categories, returning error lists keyed by category."""
        return {
            "grid": self.grid.validate(),
            "routing": self.routing.validate(),
            "display": self.display.validate(),
            "logging": self.logging.validate(),
        }
