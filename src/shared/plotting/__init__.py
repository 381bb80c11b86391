"""Plotting utilities for simulation visualizations."""
