"""
Take Command - disaster response role-play scenario generator.

Fabricates a disaster scenario, a roster of personnel and a set of
resources, then asks how you would command them.
"""

__version__ = "0.1.0"

from takecmd.core.config import Settings, load_settings
from takecmd.session import Briefing, Session, SessionSeeds

__all__ = ["Settings", "load_settings", "Briefing", "Session", "SessionSeeds", "__version__"]
