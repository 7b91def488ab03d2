import logging
import sys

from ataxx.config import CONFIG
from ataxx.core.pieces import RED, PieceColor
from ataxx.main import Engine


def play(engine: Engine, human: PieceColor = RED, read=input, write=print):
    """Terminal game: HUMAN enters moves, the engine answers for the other side.

    Commands: a move such as 'a7-b6', '-' to pass, 'block c3', 'undo', 'quit'.
    """
    board = engine.board
    while not board.game_over:
        write(board.render(legend=True))
        write("----------------------------")

        if board.whose_move is human:
            try:
                command = read(f"{human} to move: ").strip()
            except EOFError:
                return None
            if command == "quit":
                return None
            if command == "undo":
                # take back the engine's reply too
                if board.num_moves < 2:
                    write("Nothing to undo.")
                else:
                    engine.undo()
                    engine.undo()
                continue
            if command.startswith("block"):
                square = command[len("block"):].strip()
                if not engine.set_block(square):
                    write(f"Illegal block: {square}")
                continue
            if not engine.make_move(command):
                write("Illegal move, try again.")
                continue
        else:
            move = engine.play_best_move()
            write(f"Engine plays: {move}")

    write(board.render(legend=True))
    winner = board.winner
    write("Game Over")
    write(f"Result: {'draw' if not winner.is_piece else f'{winner} wins'}"
          f" ({board.red_pieces}-{board.blue_pieces})")
    return winner


def main():
    logging.basicConfig(level=CONFIG.log_level)
    human = PieceColor.parse(sys.argv[1]) if len(sys.argv) > 1 else RED
    play(Engine(depth=CONFIG.search.depth), human)


if __name__ == "__main__":
    main()
