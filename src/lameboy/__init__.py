"""
Lameboy: a tiny side-scrolling spaceship shooter.
"""

__version__ = "0.1.0"
