"""SDG Agents: a cooperative push-your-luck card game engine."""

__version__ = "0.1.0"
