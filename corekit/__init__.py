"""Building blocks for backend services: metrics, preloader, storage, PostgreSQL and Redis helpers, and utilities."""

__version__ = "0.1.0"