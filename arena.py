from collections import Counter

import numpy as np
from tqdm import tqdm

from AlphaBetaStrategy import AlphaBetaStrategy
from config import SearchConfig, get_preset
from ReversiState import Disc, ReversiState


class Arena:
    """
    A class to pit two AI agents (players) against each other in a series of games.
    It manages the game flow, tracks scores, and ensures fair competition by
    swapping player sides between games.
    """
    def __init__(self, player1, player2, verbose=True):
        self.player1 = player1
        self.player2 = player2
        self.verbose = verbose

    def _play_one_game(self, p1_starts=True):
        """
        Plays a single game of Reversi between the two players.
        Returns the game result from player1's perspective (1 if p1 wins, -1 if p2 wins, 0 for a draw).
        """
        players = {
            Disc.FIRST: self.player1 if p1_starts else self.player2,
            Disc.SECOND: self.player2 if p1_starts else self.player1,
        }

        current_state = ReversiState() # Creates the starting board, first player to move

        while not current_state.is_terminal():
            valid_moves = current_state.get_legal_moves()
            if not valid_moves: # Player must pass
                current_state = current_state.pass_turn()
                continue

            current_player_agent = players[current_state.to_play]
            action = current_player_agent.play(current_state)

            assert action in valid_moves, f"Agent returned an invalid move: {action}"
            current_state = current_state.apply_action(action)

        game_result = current_state.get_game_result()

        return game_result if p1_starts else -game_result

    def play_games(self, num_games):
        """
        Plays `num_games` games (at least one per side), player1 taking the
        first move in the first half and the second move in the second half.
        Returns (player1 wins, player2 wins, draws).
        """
        games_per_side = max(num_games // 2, 1)
        tally = Counter()
        for p1_starts, desc in ((True, "Player 1 moves first"), (False, "Player 2 moves first")):
            for _ in tqdm(range(games_per_side), desc=desc, disable=not self.verbose):
                tally[self._play_one_game(p1_starts=p1_starts)] += 1

        results = tally[1], tally[-1], tally[0]
        if self.verbose:
            self._report(*results)
        return results

    @staticmethod
    def _report(p1_wins, p2_wins, draws):
        total_games = p1_wins + p2_wins + draws
        print(f"\n{total_games} games: player 1 won {p1_wins}, player 2 won {p2_wins}, {draws} drawn")

## --------------------------------------------- ##
## Player Wrapper Classes for the Arena          ##
## --------------------------------------------- ##

class AlphaBetaPlayer:
    """
    Wrapper for the AlphaBetaStrategy to make it compatible with the Arena.
    """
    def __init__(self, config: SearchConfig):
        self.strategy = AlphaBetaStrategy(config)

    def play(self, state):
        return self.strategy.best_move(state)

class RandomPlayer:
    """
    Plays a uniformly random legal move. Useful as a baseline opponent.
    """
    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def play(self, state):
        valid_moves = state.get_legal_moves()
        if not valid_moves:
            return None
        return valid_moves[self.rng.integers(len(valid_moves))]


def main():
    arena = Arena(AlphaBetaPlayer(get_preset("normal")), AlphaBetaPlayer(get_preset("easy")))
    arena.play_games(num_games=10)

if __name__ == "__main__":
    main()
