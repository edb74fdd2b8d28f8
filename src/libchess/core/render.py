"""Text rendering of a position for terminals and logs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libchess.core.enums import CastlingRights, Color
from libchess.core.types import make_square

if TYPE_CHECKING:
    from libchess.core.position import Position

_LIGHT_SQUARE = "\x1b[47m"
_RESET = "\x1b[0m"


def render_board(position: Position, flipped: bool = False, colored: bool = True) -> str:
    """Framed 8x8 board with rank and file labels.

    *flipped* shows the board from Black's side; *colored* shades light
    squares with ANSI background codes.
    """
    white_rights = position.castle_rights(Color.WHITE)
    black_rights = position.castle_rights(Color.BLACK)
    rights = str(white_rights).upper() + str(black_rights)
    if white_rights == black_rights == CastlingRights.NEITHER:
        rights = "-"

    ranks = range(8) if flipped else range(7, -1, -1)
    files = range(7, -1, -1) if flipped else range(8)

    lines = [f"   {position.side_to_move}  {rights}", "  ╔" + "═" * 24 + "╗"]
    for rank in ranks:
        cells: list[str] = []
        for file in files:
            sq = make_square(file, rank)
            piece = position.piece_at(sq)
            cell = f" {piece if piece is not None else ' '} "
            if colored and (file + rank) % 2 == 1:
                cell = f"{_LIGHT_SQUARE}{cell}{_RESET}"
            cells.append(cell)
        lines.append(f"{rank + 1} ║{''.join(cells)}║")
    lines.append("  ╚" + "═" * 24 + "╝")
    lines.append("    " + "  ".join("abcdefgh"[f] for f in files))
    return "\n".join(lines)
