"""Freelancer.com project listing scraper and exporter."""

__version__ = "0.1.0"
