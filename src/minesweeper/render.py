"""
Text rendering of the mine field.

The layout puts a header of 1-based column indices above a bordered grid,
with each row prefixed by its 1-based row index:

     │123│
    —│———│
    1│./*│
    2│.12│
    —│———│
"""
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .board import Board

BORDER = "│"
RULE = "—"


def render_text(board: "Board") -> str:
    """
    Render the board as a deterministic text grid.

    Cells are right-aligned to the width of the widest column label, and
    row labels to the widest row label, so fields wider than nine columns
    stay aligned.

    Args:
        board: Board to render.

    Returns:
        Multi-line string without a trailing newline.
    """
    rows = board.config.rows
    columns = board.config.columns
    label_width = len(str(rows))
    cell_width = len(str(columns))

    header = "".join(str(col).rjust(cell_width) for col in range(1, columns + 1))
    rule = RULE * label_width + BORDER + RULE * (cell_width * columns) + BORDER

    lines: List[str] = [" " * label_width + BORDER + header + BORDER, rule]
    for row in range(rows):
        symbols = "".join(
            board.get_cell(row, col).symbol.rjust(cell_width)
            for col in range(columns)
        )
        lines.append(str(row + 1).rjust(label_width) + BORDER + symbols + BORDER)
    lines.append(rule)

    return "\n".join(lines)
