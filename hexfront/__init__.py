"""Game model for a hexagonal-grid strategy game: hex geometry, buildings, cities, workplaces, noise and input."""

__version__ = "0.1.0"