"""AI coaching artifacts and the in-memory store that caches them."""

from .generator import HealthInsightsGenerator
from .schemas import ArtifactKind
from .store import AIInsightsState, AIInsightsStore

__all__ = ["AIInsightsState", "AIInsightsStore", "ArtifactKind", "HealthInsightsGenerator"]
