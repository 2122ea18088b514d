"""Interactive wireframe viewer for height maps, with isometric and parallel projections."""

__version__ = "1.0.0"