"""Boutique storefront cart."""

__version__ = "1.0.0"
