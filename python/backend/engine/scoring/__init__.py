from backend.engine.scoring.scorer import Scorer

__all__ = ["Scorer"]
