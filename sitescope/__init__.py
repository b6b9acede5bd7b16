"""sitescope - site-membership filtering for clinical research data."""

__version__ = "0.1.0"
