"""
Unit tests for text rendering.
"""
from minesweeper import Board, BoardConfig, render_text


class TestRenderLayout:
    """Test the header, row labels and borders."""

    def test_new_board_is_all_hidden(self) -> None:
        """New field renders with borders and hidden markers."""
        board = Board(BoardConfig(3, 3, 0))
        assert render_text(board) == "\n".join([
            " │123│",
            "—│———│",
            "1│...│",
            "2│...│",
            "3│...│",
            "—│———│",
        ])

    def test_rectangular_board(self) -> None:
        """Header follows columns, labels follow rows."""
        board = Board(BoardConfig(2, 4, 0))
        lines = render_text(board).split("\n")
        assert lines[0] == " │1234│"
        assert lines[2] == "1│....│"
        assert lines[3] == "2│....│"
        assert len(lines) == 5

    def test_wide_board_stays_aligned(self) -> None:
        """Two-digit column labels widen every cell."""
        board = Board(BoardConfig(2, 12, 0))
        lines = render_text(board).split("\n")

        assert lines[0] == " │ 1 2 3 4 5 6 7 8 9101112│"
        assert lines[2] == "1│" + " ." * 12 + "│"
        assert len({len(line) for line in lines}) == 1

    def test_tall_board_pads_row_labels(self) -> None:
        """Two-digit row labels widen the label column."""
        board = Board(BoardConfig(10, 2, 0))
        lines = render_text(board).split("\n")

        assert lines[0] == "  │12│"
        assert lines[2] == " 1│..│"
        assert lines[11] == "10│..│"
        assert lines[12] == "——│——│"


class TestRenderSymbols:
    """Test what each cell shows during and after the game."""

    def test_flag_digit_and_open_markers(self, wall_board: Board) -> None:
        """Flags, digits and open cells render in place."""
        wall_board.toggle_flag(0, 4)
        wall_board.reveal(0, 0)

        lines = render_text(wall_board).split("\n")
        assert lines[2] == "1│/2..*│"
        assert lines[3] == "2│/3...│"
        assert lines[6] == "5│/2...│"

    def test_loss_shows_every_mine(self, corner_board: Board) -> None:
        """Loss renders the mine marker."""
        corner_board.reveal(1, 1)
        corner_board.reveal(0, 0)

        assert render_text(corner_board) == "\n".join([
            " │12│",
            "—│——│",
            "1│X.│",
            "2│.1│",
            "—│——│",
        ])

    def test_loss_shows_mines_on_wall(self, wall_board: Board) -> None:
        """Loss renders every mine in the wall."""
        wall_board.reveal(0, 4)
        wall_board.reveal(3, 2)

        assert render_text(wall_board).split("\n")[2:7] == [
            "1│..X2/│",
            "2│..X3/│",
            "3│..X3/│",
            "4│..X3/│",
            "5│..X2/│",
        ]

    def test_mines_hidden_while_playing(self, corner_board: Board) -> None:
        """Mines stay hidden during play."""
        corner_board.reveal(1, 1)
        assert "X" not in render_text(corner_board)

