"""
app.py — Flask JSON API
========================
Exposes the registry and the trace engine over HTTP.

Routes:
  GET  /api/algorithms[?category=]   – list metadata cards
  GET  /api/algorithms/<id>          – one metadata card
  POST /api/run                      – select an algorithm, return its full trace
  POST /api/step/next                – advance the cursor one step
  POST /api/step/prev                – move the cursor back one step
  POST /api/step/goto                – jump to step N
  POST /api/step/rewind              – jump to step 0
  POST /api/step/end                 – jump to the last step
  POST /api/step/seek                – jump to the next/previous step of one kind
  POST /api/config/speed             – set playback speed
  GET  /api/state                    – current selection and cursor

State management:
  Traces are deterministic, so the Flask session only holds the
  selection (algorithm id + raw params), the cursor position and the
  playback speed.  Every step request rebuilds the trace from those.
"""

import logging
import secrets
from dataclasses import asdict
from typing import Any, Dict, Mapping, Optional

from flask import Blueprint, Flask, current_app, jsonify, request, session

from algotrace.algorithms import CATEGORIES, list_algorithms, require_algorithm
from algotrace.algorithms.step import StepKind, to_jsonable
from algotrace.engine import SPEED_PRESETS, Recorder, Stepper
from algotrace.errors import InvalidInputError, UnknownAlgorithmError

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "MAX_INPUT_SIZE": 64,        # longest array / string / item list, most graph vertices
    "MAX_STEPS":      50_000,    # longest trace a request may generate
    "DEFAULT_SPEED":  "medium",
    "LOG_LEVEL":      "INFO",
    # tighter size limits for the exponential and cubic algorithms
    "ALGORITHM_LIMITS": {
        "n-queens":                {"n": 12},
        "subset-sum":              {"numbers": 16},
        "hamiltonian-path":        {"graph": 10},
        "floyd-warshall":          {"graph": 12},
        "matrix-chain":            {"dimensions": 16},
        "palindrome-partitioning": {"text": 24},
    },
}

SIZED_INTS = ("n", "amount", "capacity")

api = Blueprint("api", __name__, url_prefix="/api")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the app: defaults, then ALGOTRACE_* environment, then `config`."""
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG, SECRET_KEY=secrets.token_hex(32))
    app.config.from_prefixed_env("ALGOTRACE")
    if config:
        app.config.from_mapping(config)

    app.register_blueprint(api)
    app.register_error_handler(UnknownAlgorithmError, _unknown_algorithm)
    app.register_error_handler(InvalidInputError, _invalid_input)
    return app


def _unknown_algorithm(exc: UnknownAlgorithmError):
    return jsonify({"error": str(exc)}), 404


def _invalid_input(exc: InvalidInputError):
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_state() -> Dict[str, Any]:
    """Return current session state as a dict."""
    return {
        "algorithm":    session.get("algorithm"),
        "params":       session.get("params", {}),
        "current_step": session.get("current_step", 0),
        "speed":        session.get("speed", current_app.config["DEFAULT_SPEED"]),
    }


def set_state(**kwargs) -> None:
    for k, v in kwargs.items():
        session[k] = v


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return data


def _size(name: str, value: Any) -> Optional[int]:
    if isinstance(value, str):
        return len(value)
    if isinstance(value, list):
        # a word list is as large as its longest word
        return max([len(value)] + [len(v) for v in value if isinstance(v, str)])
    if name in SIZED_INTS and isinstance(value, int) and not isinstance(value, bool):
        return value
    if name == "graph" and isinstance(value, dict):
        vertices = value.get("num_vertices")
        if isinstance(vertices, int):
            return vertices
    return None


def _check_sizes(algo_id: str, params: Mapping[str, Any]) -> None:
    """Keep requested instances small enough to trace in a request."""
    default = current_app.config["MAX_INPUT_SIZE"]
    limits = current_app.config["ALGORITHM_LIMITS"].get(algo_id, {})
    for name, value in params.items():
        size = _size(name, value)
        limit = min(default, limits.get(name, default))
        if size is not None and size > limit:
            raise InvalidInputError(f"{name} is too large for {algo_id}: {size} > {limit}")


def _stepper() -> Stepper:
    """Rebuild the session's trace and place a cursor at the stored position."""
    state = get_state()
    if state["algorithm"] is None:
        raise InvalidInputError("No algorithm selected; POST /api/run first")
    rec = Recorder(state["algorithm"], **state["params"])
    steps = rec.generate_steps(max_steps=current_app.config["MAX_STEPS"])
    stepper = Stepper()
    stepper.load(steps, state["current_step"])
    return stepper


def _position(stepper: Stepper, moved: bool) -> Dict[str, Any]:
    set_state(current_step=stepper.current_idx)
    return {
        "moved":        moved,
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps,
        "finished":     stepper.is_finished,
        "step":         stepper.current_step.to_dict() if stepper.current_step else None,
    }


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@api.route("/algorithms", methods=["GET"])
def api_algorithms():
    category = request.args.get("category")
    if category is not None and category not in CATEGORIES:
        raise InvalidInputError(f"Unknown category: {category}")
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms(category)]})


@api.route("/algorithms/<algo_id>", methods=["GET"])
def api_algorithm(algo_id: str):
    return jsonify(require_algorithm(algo_id).to_dict())


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@api.route("/run", methods=["POST"])
def api_run():
    data = _json_body()
    algo_id = data.get("algorithm")
    if not isinstance(algo_id, str):
        raise InvalidInputError("Missing 'algorithm'")
    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise InvalidInputError("'params' must be a JSON object")

    _check_sizes(algo_id, params)
    rec = Recorder(algo_id, **params)
    steps = rec.generate_steps(max_steps=current_app.config["MAX_STEPS"])
    LOGGER.info("Ran %s: %d steps", algo_id, len(steps))

    set_state(algorithm=algo_id, params=params, current_step=0)
    return jsonify({
        "info":    rec.get_algorithm_info().to_dict(),
        "params":  rec.serialised_params(),
        "metrics": to_jsonable(asdict(rec.get_metrics())),
        "steps":   [s.to_dict() for s in steps],
    })


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@api.route("/step/next", methods=["POST"])
def api_step_next():
    stepper = _stepper()
    return jsonify(_position(stepper, stepper.next_step()))


@api.route("/step/prev", methods=["POST"])
def api_step_prev():
    stepper = _stepper()
    return jsonify(_position(stepper, stepper.prev_step()))


@api.route("/step/goto", methods=["POST"])
def api_step_goto():
    idx = _json_body().get("step")
    if isinstance(idx, bool) or not isinstance(idx, int):
        raise InvalidInputError("'step' must be an integer")
    stepper = _stepper()
    return jsonify(_position(stepper, stepper.goto_step(idx)))


@api.route("/step/rewind", methods=["POST"])
def api_step_rewind():
    stepper = _stepper()
    return jsonify(_position(stepper, stepper.rewind()))


@api.route("/step/end", methods=["POST"])
def api_step_end():
    stepper = _stepper()
    return jsonify(_position(stepper, stepper.jump_to_end()))


@api.route("/step/seek", methods=["POST"])
def api_step_seek():
    data = _json_body()
    try:
        kind = StepKind(data.get("kind"))
    except ValueError:
        raise InvalidInputError(f"'kind' must be one of {[k.value for k in StepKind]}") from None
    forward = data.get("direction", "forward") != "backward"
    stepper = _stepper()
    return jsonify(_position(stepper, stepper.seek(kind, forward=forward)))


# ---------------------------------------------------------------------------
# API: Config
# ---------------------------------------------------------------------------
@api.route("/config/speed", methods=["POST"])
def api_config_speed():
    speed = _json_body().get("speed")
    stepper = Stepper()
    if isinstance(speed, str) and speed in SPEED_PRESETS:
        stepper.set_speed(speed)
    elif isinstance(speed, (int, float)) and not isinstance(speed, bool) and speed > 0:
        stepper.set_speed_value(float(speed))
    else:
        raise InvalidInputError(f"'speed' must be one of {list(SPEED_PRESETS)} or a positive number")
    set_state(speed=speed)
    return jsonify({"speed": stepper.speed, "interval_ms": stepper.interval_ms})


# ---------------------------------------------------------------------------
# API: State
# ---------------------------------------------------------------------------
@api.route("/state", methods=["GET"])
def api_state():
    state = get_state()
    stepper = Stepper()
    speed = state["speed"]
    if isinstance(speed, str):
        stepper.set_speed(speed)
    else:
        stepper.set_speed_value(speed)
    state["interval_ms"] = stepper.interval_ms
    return jsonify(state)
