"""Grid, boundary, diagnostics and plotting tools for advection fields, and a tiled five-point stencil."""

__version__ = "0.1.0"