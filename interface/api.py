"""FastAPI REST interface for the engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Optional

from ataxx.core.errors import GameError
from ataxx.core.search import SearchEngine
from ataxx.main import Engine
from ataxx.config import CONFIG

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared game; requests are serialized on the lock.
engine = Engine(depth=CONFIG.search.depth)
board = engine.board
_board_lock = threading.Lock()


class MoveRequest(BaseModel):
    move: str  # e.g. "a7-b6", or "-" to pass


class BlockRequest(BaseModel):
    square: str  # e.g. "c3"


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(default=None, ge=1)


def _state():
    winner = board.winner
    return {
        "board": board.render(legend=True),
        "turn": str(board.whose_move),
        "red": board.red_pieces,
        "blue": board.blue_pieces,
        "legal_moves": engine.legal_moves(),
        "is_game_over": winner is not None,
        "winner": None if winner is None else ("draw" if not winner.is_piece else str(winner)),
        "moves": [str(m) for m in board.all_moves],
    }


@app.get("/board")
def get_board():
    with _board_lock:
        return _state()


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        if board.game_over:
            raise HTTPException(status_code=400, detail="Game is already over")
        try:
            board.make_move(req.move)
        except GameError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"move": req.move, **_state()}


@app.post("/block")
def set_block(req: BlockRequest):
    with _board_lock:
        try:
            board.set_block(req.square)
        except GameError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _state()


@app.post("/undo")
def undo_move():
    with _board_lock:
        try:
            board.undo()
        except GameError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _state()


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if board.game_over:
            raise HTTPException(status_code=400, detail="Game is already over")
        depth = req.depth or CONFIG.search.depth
        search_board = board.copy()

    result = SearchEngine(depth=depth).find_move(search_board)
    return {
        "best_move": str(result.move) if result.move is not None else None,
        "score": result.score,
        "nodes": result.nodes,
    }


@app.post("/reset")
def reset_board():
    with _board_lock:
        engine.reset()
        return _state()
