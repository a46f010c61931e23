"""
pygame presentation layer: window, rendering and keyboard input.

The app, render and input modules need pygame (the ``ui`` extra).
"""
