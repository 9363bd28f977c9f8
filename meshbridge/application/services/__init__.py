"""
Services Package - Application Layer

Long-lived services of the pipeline: they subscribe to channels or hold
per-token state, so the container keeps a single instance of each.
"""

from .claim_orchestrator import ClaimOrchestrator
from .command_translator import CommandTranslator
from .event_ingest import EventIngest

__all__ = ["ClaimOrchestrator", "CommandTranslator", "EventIngest"]
