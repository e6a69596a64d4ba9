"""
Orchestrators coordinating the services behind each API operation.
"""

from .card_orchestrator import CardOrchestrator, EmptyVerseStoreError

__all__ = ["CardOrchestrator", "EmptyVerseStoreError"]
