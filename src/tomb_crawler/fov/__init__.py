from .field_of_view import FieldOfView
from .fov import bresenham_line, compute_fov, has_line_of_sight

__all__ = ["FieldOfView", "bresenham_line", "compute_fov", "has_line_of_sight"]
