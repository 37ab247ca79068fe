from backend.engine.gamerules.rules import (
    IllegalMoveError,
    assert_legal,
    check_move,
    is_legal,
    legal_moves,
)

__all__ = ["IllegalMoveError", "assert_legal", "check_move", "is_legal", "legal_moves"]
