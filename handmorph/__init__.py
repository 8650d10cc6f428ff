"""
HandMorph.
==========

Hand-landmark signal conditioning for gesture-driven visual effects.
Turns a noisy stream of 21-point hand skeletons into a stable
(scale, rotation_x, rotation_y) transform.
"""

__version__ = "1.0.0"
