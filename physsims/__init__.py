"""Classical-mechanics simulations that compute trajectories and write them as data tables."""

__version__ = "1.0.0"