"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, Rules, parse_square, is_legal_move

    board = Board.initial()
    knight = board[parse_square("g1")]
    is_legal_move(board, knight, parse_square("g1"), parse_square("f3"))  # True
    Rules.is_checkmate(board, Color.WHITE)  # False
"""

from chessrules.core.board import Board
from chessrules.core.check import attackers_of, checkers, is_in_check, leaves_king_safe
from chessrules.core.enums import Color, GameResult, MoveFlag, PieceType
from chessrules.core.errors import (
    ChessRulesError,
    EmptySquareError,
    IllegalMoveError,
    InvalidPlacementError,
    InvalidPromotionError,
    KingNotFoundError,
    OutOfBoundsSquareError,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.options import DEFAULT_OPTIONS, RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.placement import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessrules.core.rules import (
    Rules,
    game_result,
    is_checkmate,
    is_insufficient_material,
    is_stalemate,
    legal_moves,
)
from chessrules.core.special_moves import (
    PROMOTION_KINDS,
    castling_move,
    en_passant_move,
    en_passant_target,
    is_valid_castling,
    is_valid_en_passant,
    is_valid_pawn_promotion,
    perform_pawn_promotion,
    promotion_move,
)
from chessrules.core.types import (
    CastlingRights,
    Square,
    as_square,
    is_valid_square,
    parse_square,
    square_name,
)
from chessrules.core.validator import (
    is_legal_move,
    is_valid_bishop_move,
    is_valid_king_move,
    is_valid_knight_move,
    is_valid_pawn_move,
    is_valid_queen_move,
    is_valid_rook_move,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "CastlingRights",
    "Square",
    "as_square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Errors
    "ChessRulesError",
    "EmptySquareError",
    "IllegalMoveError",
    "InvalidPlacementError",
    "InvalidPromotionError",
    "KingNotFoundError",
    "OutOfBoundsSquareError",
    # Configuration
    "DEFAULT_OPTIONS",
    "RuleOptions",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Validation
    "is_legal_move",
    "is_valid_bishop_move",
    "is_valid_king_move",
    "is_valid_knight_move",
    "is_valid_pawn_move",
    "is_valid_queen_move",
    "is_valid_rook_move",
    # Check / terminal states
    "attackers_of",
    "checkers",
    "game_result",
    "is_checkmate",
    "is_in_check",
    "is_insufficient_material",
    "is_stalemate",
    "leaves_king_safe",
    "legal_moves",
    # Special moves
    "PROMOTION_KINDS",
    "castling_move",
    "en_passant_move",
    "en_passant_target",
    "is_valid_castling",
    "is_valid_en_passant",
    "is_valid_pawn_promotion",
    "perform_pawn_promotion",
    "promotion_move",
    # Placement strings
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
