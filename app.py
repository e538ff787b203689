from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        Game,
        RunResult,
        load_pattern,
        pattern_names,
        random_soup,
        render_text,
    )
except ImportError:
    from game import (  # type: ignore
        Game,
        RunResult,
        load_pattern,
        pattern_names,
        random_soup,
        render_text,
    )

app = Flask(__name__)


def _max_steps() -> int:
    try:
        return max(1, int(os.getenv("LIFE_MAX_STEPS", "1000")))
    except ValueError:
        return 1000


def _max_soup() -> int:
    try:
        return max(1, int(os.getenv("LIFE_MAX_SOUP", "65536")))
    except ValueError:
        return 65536


def _int_value(value: Any, name: str) -> int:
    # JSON true/false would pass isinstance(int); floats are never truncated.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    return value


def _coord(obj: Any) -> Tuple[int, int]:
    if not isinstance(obj, (list, tuple)) or len(obj) != 2:
        raise ValueError("cell must be [x, y]")
    x, y = obj
    return _int_value(x, "x"), _int_value(y, "y")


def _json_body() -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}, None
    if not isinstance(body, dict):
        return None, "body must be a JSON object"
    return body, None


def state_to_json(g: Game) -> Dict[str, Any]:
    return {
        "generation": int(g.generation),
        "cells": [[int(x), int(y)] for (x, y) in g.cells()],
        "population": int(g.population),
        "fringe": len(g.board.fringe()),
        "text": render_text(g),
    }


def json_to_state(obj: Dict[str, Any]) -> Game:
    cells = [_coord(c) for c in obj.get("cells", [])]
    return Game.from_cells(cells, generation=_int_value(obj.get("generation", 0), "generation"))


def run_result_to_json(res: RunResult) -> Dict[str, Any]:
    return {
        "generations": res.generations,
        "population": res.population,
        "extinct": res.extinct,
        "period": res.period,
        "displacement": list(res.displacement) if res.displacement is not None else None,
        "stillLife": res.still_life,
        "spaceship": res.spaceship,
    }


def _bad_request(msg: str) -> Any:
    return jsonify({"ok": False, "error": msg}), 400


def _state_from_body(body: Dict[str, Any]) -> Tuple[Optional[Game], Optional[str]]:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, "missing state"
    try:
        return json_to_state(s_in), None
    except (TypeError, ValueError) as e:
        return None, f"bad state: {e}"


def _random_cells(rnd: Any) -> List[Tuple[int, int]]:
    if not isinstance(rnd, dict):
        raise ValueError("random must be an object")
    width = _int_value(rnd.get("width", 16), "width")
    height = _int_value(rnd.get("height", 16), "height")
    limit = _max_soup()
    if width * height > limit:
        raise ValueError(f"random soup area must be at most {limit} cells")
    density = rnd.get("density", 0.5)
    if isinstance(density, bool) or not isinstance(density, (int, float)):
        raise ValueError("density must be a number")
    return list(random_soup(width, height, density=float(density), seed=rnd.get("seed")))


@app.get("/api/patterns")
def api_patterns() -> Any:
    return jsonify({"ok": True, "patterns": pattern_names()})


@app.post("/api/new")
def api_new() -> Any:
    body, err = _json_body()
    if body is None:
        return _bad_request(err or "bad body")
    try:
        if body.get("cells") is not None:
            cells: List[Tuple[int, int]] = [_coord(c) for c in body["cells"]]
        elif body.get("random") is not None:
            cells = _random_cells(body["random"])
        else:
            cells = list(load_pattern(str(body.get("pattern", "glider"))))
    except (TypeError, ValueError) as e:
        return _bad_request(str(e))
    g = Game.from_cells(cells)
    return jsonify({"ok": True, "state": state_to_json(g)})


@app.post("/api/tick")
def api_tick() -> Any:
    body, err = _json_body()
    if body is None:
        return _bad_request(err or "bad body")
    g, err = _state_from_body(body)
    if g is None:
        return _bad_request(err or "bad state")
    try:
        steps = _int_value(body.get("steps", 1), "steps")
    except ValueError as e:
        return _bad_request(str(e))
    limit = _max_steps()
    if steps < 0 or steps > limit:
        return _bad_request(f"steps must be between 0 and {limit}")
    for _ in range(steps):
        g.tick()
    return jsonify({"ok": True, "state": state_to_json(g)})


@app.post("/api/neighbors")
def api_neighbors() -> Any:
    body, err = _json_body()
    if body is None:
        return _bad_request(err or "bad body")
    g, err = _state_from_body(body)
    if g is None:
        return _bad_request(err or "bad state")
    try:
        x, y = _coord(body.get("cell"))
    except ValueError:
        return _bad_request("cell must be [x, y]")
    return jsonify({"ok": True, "cell": [x, y], "alive": g.board.is_alive(x, y), "count": g.board.neighbor_count(x, y)})


@app.post("/api/run")
def api_run() -> Any:
    body, err = _json_body()
    if body is None:
        return _bad_request(err or "bad body")
    g, err = _state_from_body(body)
    if g is None:
        return _bad_request(err or "bad state")
    try:
        generations = _int_value(body.get("generations", 1), "generations")
    except ValueError as e:
        return _bad_request(str(e))
    limit = _max_steps()
    if generations < 0 or generations > limit:
        return _bad_request(f"generations must be between 0 and {limit}")
    stop_on_repeat = body.get("stopOnRepeat", True)
    if not isinstance(stop_on_repeat, bool):
        return _bad_request("stopOnRepeat must be true or false")
    res = g.run(generations, stop_on_repeat=stop_on_repeat)
    return jsonify({"ok": True, "result": run_result_to_json(res), "state": state_to_json(g)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
