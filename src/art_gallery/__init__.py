"""
art-gallery: Camera placement for simple polygon galleries.

Solves the Art Gallery Problem for a simple polygon given as a closed list of
boundary edges, by ear-clipping triangulation and Fisk's 3-coloring argument.
At most floor(n/3) cameras are placed, all on boundary vertices.

Pipeline:
- graph: Planar adjacency structure built from the edge list
- validation: Checks for a single simple closed boundary
- triangulation: Constrained ear-clipping triangulation
- guards: 3-coloring and choice of the smallest color class
- gallery: ArtGallery solver running the whole pipeline
"""

__version__ = "0.1.0"

# Solver
from .gallery import ArtGallery, GallerySolution, solve

# Planar graph
from .graph import PlanarGraph

# Guard selection
from .guards import color_classes, coloring_graph, select_guards, three_color

# Metrics for solution evaluation
from .metrics import (
    guard_bound,
    polygon_area,
    reflex_vertices,
    solution_summary,
    uncovered_triangles,
)

# Geometric predicates
from .predicates import (
    interior_angle,
    on_segment,
    orientation,
    point_in_polygon,
    point_in_triangle,
    segments_intersect,
    signed_area,
    winding,
)

# Triangulation
from .triangulation import Triangulation, triangulate
from .types import (
    PALETTE,
    Color,
    Edge,
    EdgeLike,
    Orientation,
    Point,
    PointLike,
    Triangle,
    Vertex,
)

# Validation utilities
from .validation import (
    GalleryError,
    GalleryStructureWarning,
    InvalidPointError,
    MalformedBoundaryError,
    SelfIntersectingBoundaryError,
    TriangulationError,
    ValidationError,
    is_closed,
    validate_boundary,
    validate_edges,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Point",
    "Edge",
    "Vertex",
    "Triangle",
    "Orientation",
    "Color",
    "PALETTE",
    # Type aliases for API
    "PointLike",
    "EdgeLike",
    # Solver
    "ArtGallery",
    "GallerySolution",
    "solve",
    # Planar graph
    "PlanarGraph",
    # Predicates
    "orientation",
    "on_segment",
    "segments_intersect",
    "interior_angle",
    "point_in_polygon",
    "point_in_triangle",
    "signed_area",
    "winding",
    # Triangulation
    "Triangulation",
    "triangulate",
    # Guard selection
    "coloring_graph",
    "three_color",
    "color_classes",
    "select_guards",
    # Metrics
    "polygon_area",
    "reflex_vertices",
    "guard_bound",
    "uncovered_triangles",
    "solution_summary",
    # Validation
    "GalleryError",
    "ValidationError",
    "InvalidPointError",
    "MalformedBoundaryError",
    "SelfIntersectingBoundaryError",
    "TriangulationError",
    "GalleryStructureWarning",
    "is_closed",
    "validate_boundary",
    "validate_edges",
]
