"""Flask API application."""

import logging
from typing import Any, Optional

from flask import Flask, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from litsim.config import DEFAULT_API_DEBUG, DEFAULT_API_PORT, DEFAULT_LOG_LEVEL
from litsim.engine.combat import CombatResolver
from litsim.engine.loot import LootRoller
from litsim.engine.progression import ProgressionProjector
from litsim.errors import InvalidArgument, LitsimError
from litsim.models.combat import CombatAction
from litsim.models.loot import LootTable
from litsim.models.progression import CharacterSnapshot, ProgressionSettings
from litsim.models.stats import CombatStats

from ..api.sim_config import SimulationConfig, SimulationConfigManager

logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='[%(name)-19s - %(levelname)5s] %(message)s')

app = Flask("flask.litsim")

_sim_config_manager = SimulationConfigManager()


@app.before_request
def log_request_info():
    app.logger.info('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


# Error handlers for API routes
@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors in API routes."""
    if request.path.startswith("/api/"):
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response
    return e


@app.errorhandler(ValidationError)
def handle_validation_error(e: ValidationError):
    """Malformed engine input."""
    return jsonify({"error": "Invalid input", "message": str(e)}), 400


@app.errorhandler(LitsimError)
def handle_engine_error(e: LitsimError):
    """Input the engine refused to simulate."""
    return jsonify({"error": type(e).__name__, "message": str(e)}), 400


@app.errorhandler(500)
def handle_internal_error(e: Exception):
    """Handle 500 errors."""
    app.logger.error(f"Internal server error: {e}", exc_info=True)
    return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500


def _get_json_body() -> Optional[dict[str, Any]]:
    """Request body as a dict, or None when missing or not JSON."""
    if not request.is_json:
        return None
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _body_error():
    return jsonify({"error": "Request body must be a JSON object"}), 400


def _int_field(data: dict[str, Any], key: str, default: int) -> int:
    """Integer request field, or InvalidArgument when it is not one."""
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{key} must be an integer, got {value!r}")
    return value


def _seed_field(data: dict[str, Any]) -> Optional[int]:
    """Request seed, None when absent, or InvalidArgument when it is not an integer."""
    seed = data.get("seed")
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidArgument(f"seed must be an integer, got {seed!r}")
    return seed


def _limit_error(name: str, value: int, limit: int):
    if value > limit:
        return jsonify({"error": "InvalidArgument", "message": f"{name} must not exceed {limit}, got {value}"}), 400
    return None


@app.route("/api/progression/project", methods=["POST"])
def project_progression():
    """Project a character across a story."""
    data = _get_json_body()
    if data is None:
        return _body_error()

    config = _sim_config_manager.config
    character = CharacterSnapshot.model_validate(data.get("character") or {})
    settings = ProgressionSettings.model_validate(data.get("settings") or {})
    story_length = _int_field(data, "story_length", config.story_length)
    error = _limit_error("story_length", story_length, config.max_story_length)
    if error:
        return error

    snapshots = ProgressionProjector.project(character, story_length, settings)
    summary = ProgressionProjector.summarize(snapshots, starting_level=character.level)
    return jsonify({
        "snapshots": [snapshot.model_dump(mode="json") for snapshot in snapshots],
        "summary": summary.model_dump(mode="json"),
    })


@app.route("/api/combat/resolve", methods=["POST"])
def resolve_action():
    """Resolve one combat action."""
    data = _get_json_body()
    if data is None:
        return _body_error()

    action = CombatAction.model_validate(data.get("action") or {})
    attacker = CombatStats.model_validate(data.get("attacker") or {})
    defender = CombatStats.model_validate(data.get("defender") or {})
    rng = _sim_config_manager.config.make_roller(_seed_field(data))

    outcome = CombatResolver.resolve(action, attacker, defender, rng)
    return jsonify({"outcome": outcome.model_dump(mode="json")})


@app.route("/api/combat/simulate", methods=["POST"])
def simulate_action():
    """Monte Carlo batch of one combat action plus static balance metrics."""
    data = _get_json_body()
    if data is None:
        return _body_error()

    config = _sim_config_manager.config
    action = CombatAction.model_validate(data.get("action") or {})
    attacker = CombatStats.model_validate(data.get("attacker") or {})
    defender = CombatStats.model_validate(data.get("defender") or {})
    trials = _int_field(data, "trials", config.combat_trials)
    error = _limit_error("trials", trials, config.max_trials)
    if error:
        return error

    statistics = CombatResolver.simulate(action, attacker, defender, trials, config.make_roller(_seed_field(data)))
    return jsonify({
        "statistics": statistics.model_dump(mode="json"),
        "balance": CombatResolver.recommend(action).model_dump(mode="json"),
    })


@app.route("/api/loot/roll", methods=["POST"])
def roll_loot():
    """Roll a loot table once."""
    data = _get_json_body()
    if data is None:
        return _body_error()

    table = LootTable.model_validate(data.get("table") or {})
    result = LootRoller.roll(table, _sim_config_manager.config.make_roller(_seed_field(data)))
    return jsonify({"result": result.model_dump(mode="json")})


@app.route("/api/loot/analyze", methods=["POST"])
def analyze_loot():
    """Roll a loot table many times and report statistics and balance."""
    data = _get_json_body()
    if data is None:
        return _body_error()

    config = _sim_config_manager.config
    table = LootTable.model_validate(data.get("table") or {})
    trials = _int_field(data, "trials", config.loot_trials)
    error = _limit_error("trials", trials, config.max_trials)
    if error:
        return error

    statistics, balance = LootRoller.analyze(table, trials, config.make_roller(_seed_field(data)))
    return jsonify({
        "statistics": statistics.model_dump(mode="json"),
        "balance": balance.model_dump(mode="json"),
        "expected_value": LootRoller.expected_value(table).model_dump(mode="json"),
    })


@app.route("/api/config/simulation", methods=["GET"])
def get_simulation_config():
    """Get current simulation configuration."""
    return jsonify({"config": _sim_config_manager.config.model_dump()})


@app.route("/api/config/simulation", methods=["POST"])
def update_simulation_config():
    """Update simulation configuration (hot-reload)."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json()
    if not data:
        return jsonify({"error": "No data provided"}), 400

    try:
        new_config = SimulationConfig.model_validate(data)
        _sim_config_manager.update_config(new_config)
        return jsonify({"success": True, "config": _sim_config_manager.config.model_dump()})
    except ValidationError as e:
        app.logger.warning(f"Rejected simulation config update: {e}")
        return jsonify({"error": "Invalid configuration", "message": str(e)}), 400


if __name__ == "__main__":
    app.run(debug=DEFAULT_API_DEBUG, port=DEFAULT_API_PORT)
