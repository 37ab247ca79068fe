from backend.engine.gameplay.animation import Animator, InstantAnimator
from backend.engine.gameplay.scheduler import MoveScheduler

__all__ = ["Animator", "InstantAnimator", "MoveScheduler"]
