"""A Flask JSON REST service for a taco shop's meats, sauces, sodas, tacos and orders."""

__version__ = "0.1.0"
__all__ = ["__version__"]