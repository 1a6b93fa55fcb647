"""Depth scaling, weighted picks, and room population services."""
