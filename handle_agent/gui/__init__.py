"""Handle Agent GUI module.

Provides the tkinter desktop front end.
"""

from handle_agent.gui.main_window import HandleAgentApp

__all__ = ["HandleAgentApp"]
