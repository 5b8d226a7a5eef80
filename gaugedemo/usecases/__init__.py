"""Use-case layer for orchestrating the gauge animation.

Modules here coordinate domain objects and ports without touching widgets,
so the animation lifecycle can be exercised with fake clocks and tick sources.
"""
