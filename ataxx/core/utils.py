from .evaluator import WINNING_VALUE


def format_info(depth, score, nodes, elapsed, move):
    nps = int(nodes / elapsed) if elapsed > 0 else 0

    if abs(score) >= WINNING_VALUE:
        plies = depth - (abs(score) - WINNING_VALUE)
        score_str = f"win {plies if score > 0 else -plies}"
    else:
        score_str = f"pieces {score}"

    return f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} move {move}"
