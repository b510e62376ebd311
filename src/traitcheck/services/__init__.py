"""Services facade for traitcheck.

Async entry points for hosts that run an event loop (the CLI drives them
through ``asyncio.run``).
"""

from traitcheck.services.analysis import AnalysisService

__all__ = ["AnalysisService"]
