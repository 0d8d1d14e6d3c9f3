"""
DisasterWatch - Disaster report monitoring engine.
Coordinate extraction, styling, filtering, analytics and map control
for crowdsourced disaster-sighting reports.
"""

__version__ = "0.1.0"
