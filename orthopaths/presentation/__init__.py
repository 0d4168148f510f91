"""Presentation layer for orthopaths."""
from .console_reporter import ConsoleReporter
from .grid_view import cell_color, cell_char, path_color, render_lines, render_text

__all__ = ['ConsoleReporter', 'cell_color', 'cell_char', 'path_color', 'render_lines', 'render_text']
