"""Fibonacci sequence generator with an animated spiral tiling preview."""
