import numpy as np
from othello_ai.game.game import Coordinate, GameState


EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

# (row step, col step) for the eight lines through a cell
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

SYMBOLS = {EMPTY: '.', PLAYER_ONE: 'B', PLAYER_TWO: 'W'}


def opponent(player):
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


def _shift(mask, dr, dc):
    """Returns out with out[r, c] = mask[r + dr, c + dc] (False off the board)."""
    n = mask.shape[0]
    out = np.zeros_like(mask)
    out[max(-dr, 0):n - max(dr, 0), max(-dc, 0):n - max(dc, 0)] = \
        mask[max(dr, 0):n - max(-dr, 0), max(dc, 0):n - max(-dc, 0)]
    return out


class OthelloState(GameState):
    """
    Othello (Reversi) position on a square board.

    Board: side_length x side_length numpy int8 array
    Values: 0=Empty, 1=Player 1 (Black, moves first), 2=Player 2 (White)
    Actions: Coordinate of an empty cell that brackets at least one opposing
    line; every bracketed line is flipped.
    """

    def __init__(self, board, side_to_move=PLAYER_ONE):
        raw = np.asarray(board)
        if raw.ndim != 2 or raw.shape[0] != raw.shape[1]:
            raise ValueError(f"Board must be square, got shape {raw.shape}")
        # Checked before the int8 cast, which would truncate 1.5 or wrap 258
        if not np.isin(raw, (EMPTY, PLAYER_ONE, PLAYER_TWO)).all():
            raise ValueError("Board cells must be 0 (empty), 1 or 2")
        board = raw.astype(np.int8)
        if side_to_move not in (PLAYER_ONE, PLAYER_TWO):
            raise ValueError(f"Side to move must be 1 or 2, got {side_to_move}")

        self._board = board
        self._side_to_move = side_to_move
        self._legal_moves = None
        self._passed = None

    @classmethod
    def initial(cls, side_length=8, side_to_move=PLAYER_ONE):
        """
        Returns the standard starting position: four tokens around the centre.
        """
        if side_length < 4 or side_length % 2:
            raise ValueError(f"Side length must be even and at least 4, got {side_length}")

        board = np.zeros((side_length, side_length), dtype=np.int8)
        half = side_length // 2
        board[half - 1, half - 1] = PLAYER_TWO
        board[half, half] = PLAYER_TWO
        board[half - 1, half] = PLAYER_ONE
        board[half, half - 1] = PLAYER_ONE
        return cls(board, side_to_move)

    @classmethod
    def from_board(cls, board, side_to_move):
        """Builds a state from any nested sequence or array of cell values."""
        return cls(board, side_to_move)

    @classmethod
    def _trusted(cls, board, side_to_move):
        # Internal constructor for boards this class produced itself
        state = cls.__new__(cls)
        state._board = board
        state._side_to_move = side_to_move
        state._legal_moves = None
        state._passed = None
        return state

    def __repr__(self):
        return f"OthelloState({self.side_length}x{self.side_length}, to_move={self._side_to_move})"

    @property
    def board(self):
        view = self._board.view()
        view.flags.writeable = False
        return view

    @property
    def side_to_move(self):
        return self._side_to_move

    @property
    def side_length(self):
        return self._board.shape[0]

    def token_counts(self):
        return (
            int(np.count_nonzero(self._board == PLAYER_ONE)),
            int(np.count_nonzero(self._board == PLAYER_TWO)),
        )

    def legal_moves(self):
        """
        Returns legal Coordinates for the side to move, in row-major order.
        """
        if self._legal_moves is None:
            rows, cols = np.nonzero(self._legal_mask(self._side_to_move))
            self._legal_moves = [Coordinate(int(r), int(c)) for r, c in zip(rows, cols)]
        return list(self._legal_moves)

    def _legal_mask(self, player):
        """
        Vectorised move generation.

        For each direction, grow the set of opponent tokens that sit on an
        unbroken opponent run ending at one of our tokens; an empty cell whose
        neighbour in that direction is in the set is a legal move.
        """
        own = self._board == player
        opp = self._board == opponent(player)
        empty = self._board == EMPTY
        legal = np.zeros_like(own)

        for dr, dc in DIRECTIONS:
            chain = opp & _shift(own, dr, dc)
            if not chain.any():
                continue
            while True:
                grown = chain | (opp & _shift(chain, dr, dc))
                if np.array_equal(grown, chain):
                    break
                chain = grown
            legal |= empty & _shift(chain, dr, dc)

        return legal

    def _flips(self, row, col, player):
        """Returns the cells flipped if player places a token at (row, col)."""
        n = self.side_length
        other = opponent(player)
        flips = []
        for dr, dc in DIRECTIONS:
            line = []
            r, c = row + dr, col + dc
            while 0 <= r < n and 0 <= c < n and self._board[r, c] == other:
                line.append((r, c))
                r += dr
                c += dc
            if line and 0 <= r < n and 0 <= c < n and self._board[r, c] == player:
                flips.extend(line)
        return flips

    def apply_move(self, position):
        """
        Place a token for the side to move and flip every bracketed line.

        Args:
            position: Coordinate of the cell to play

        Returns:
            New state with the opponent to move; this state is left untouched
        """
        row, col = position.row, position.col
        n = self.side_length
        if not (0 <= row < n and 0 <= col < n):
            raise ValueError(f"Position {position} is outside the {n}x{n} board")
        if self._board[row, col] != EMPTY:
            raise ValueError(f"Position {position} is already occupied")

        player = self._side_to_move
        flips = self._flips(row, col, player)
        if not flips:
            raise ValueError(f"Position {position} is not a legal move for player {player}")

        board = self._board.copy()
        board[row, col] = player
        for r, c in flips:
            board[r, c] = player
        return OthelloState._trusted(board, opponent(player))

    def forced_pass(self):
        if self._passed is None:
            passed = OthelloState._trusted(self._board, opponent(self._side_to_move))
            passed._passed = self
            self._passed = passed
        return self._passed

    def is_terminal(self):
        return not self.legal_moves() and not self.forced_pass().legal_moves()

    def winner(self):
        """
        Returns 1 or 2 for the player with more tokens, 0 for a draw, or None
        while the game is still running.
        """
        if not self.is_terminal():
            return None
        tokens_p1, tokens_p2 = self.token_counts()
        if tokens_p1 > tokens_p2:
            return PLAYER_ONE
        if tokens_p2 > tokens_p1:
            return PLAYER_TWO
        return 0

    def render(self):
        """ASCII grid with row/column indices."""
        header = "  " + " ".join(str(c) for c in range(self.side_length))
        rows = [
            f"{r} " + " ".join(SYMBOLS[int(v)] for v in self._board[r])
            for r in range(self.side_length)
        ]
        return header + "\n" + "\n".join(rows)
