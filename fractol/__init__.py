"""Mandelbrot, Julia and Phoenix fractal rendering and an interactive viewer."""

__version__ = "0.1.0"