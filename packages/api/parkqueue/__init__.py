# This project was developed with assistance from AI tools.
"""Parking exit-queue API: urgency ranking for paid vehicles awaiting exit."""

__version__ = "0.1.0"
