from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A (row, col) cell on the board."""
    row: int
    col: int

    def __str__(self):
        return f"({self.row}, {self.col})"


class GameState(ABC):
    """
    Abstract Base Class for a board snapshot consumed by the search engine.

    Snapshots are immutable by convention: apply_move and forced_pass return
    new objects and never touch the receiver.
    """

    @property
    @abstractmethod
    def side_to_move(self):
        """
        Returns the player whose turn it is (1 or 2).
        """
        pass

    @property
    @abstractmethod
    def side_length(self):
        """
        Returns the number of cells along one side of the square board.
        """
        pass

    @abstractmethod
    def token_counts(self):
        """
        Returns (tokens of player 1, tokens of player 2).
        """
        pass

    @abstractmethod
    def legal_moves(self):
        """
        Returns the list of Coordinates the side to move may play.
        """
        pass

    @abstractmethod
    def is_terminal(self):
        """
        Returns True when neither player has a legal move.
        """
        pass

    @abstractmethod
    def apply_move(self, position):
        """
        Returns the state after the side to move plays at position.
        """
        pass

    @abstractmethod
    def forced_pass(self):
        """
        Returns the state with the turn handed over and no token placed.
        """
        pass
