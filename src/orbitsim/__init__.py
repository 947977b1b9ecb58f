"""
orbitsim: 2D sun-and-planets gravity simulator

One fixed attractor pulls on a set of orbiting bodies; each tick applies
gravity to every body, then moves every body (forward Euler). Each tick
produces a Frame (sun position, planet positions, planet trails) for a
renderer to turn into an animation.
"""

__version__ = "0.1.0"
