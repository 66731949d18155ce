"""Tests for the Flask API."""

import pytest

from litsim.api import app as app_module
from litsim.api.sim_config import SimulationConfig, SimulationConfigManager


@pytest.fixture
def client(monkeypatch):
    """Test client with an isolated simulation config."""
    manager = SimulationConfigManager(SimulationConfig(combat_trials=200, loot_trials=100, max_trials=5000, max_story_length=60, seed=1))
    monkeypatch.setattr(app_module, "_sim_config_manager", manager)
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as test_client:
        yield test_client


ACTION = {
    "name": "Sword Strike",
    "base_damage": 20,
    "damage_type": "physical",
    "accuracy": 10,
    "crit_chance": 10,
    "crit_multiplier": 2.0,
    "energy_cost": 10,
    "cooldown": 0,
}

TABLE = {
    "name": "Goblin",
    "entries": [
        {"name": "Gold", "type": "currency", "quantity": {"min": 1, "max": 10}, "weight": 50},
        {"name": "Nothing", "type": "nothing", "weight": 50},
    ],
}


class TestProgressionRoute:
    """POST /api/progression/project."""

    def test_project(self, client):
        response = client.post(
            "/api/progression/project",
            json={
                "character": {"level": 1, "stats": {"strength": 10}},
                "story_length": 3,
                "settings": {"experience_rate": 1000, "leveling_curve": "linear", "stat_growth_rate": 1},
            },
        )
        assert response.status_code == 200
        data = response.get_json()
        assert [s["level"] for s in data["snapshots"]] == [2, 2, 3]
        assert data["summary"]["final_level"] == 3
        assert data["summary"]["level_up_chapters"] == [1, 3]

    def test_default_story_length(self, client):
        response = client.post("/api/progression/project", json={"character": {}})
        assert response.status_code == 200
        assert len(response.get_json()["snapshots"]) == SimulationConfig().story_length

    def test_invalid_settings(self, client):
        response = client.post(
            "/api/progression/project",
            json={"character": {}, "story_length": 3, "settings": {"experience_rate": 0}},
        )
        assert response.status_code == 400
        assert response.get_json()["error"] == "InvalidSettings"

    def test_invalid_story_length(self, client):
        response = client.post("/api/progression/project", json={"story_length": 0})
        assert response.status_code == 400
        assert response.get_json()["error"] == "InvalidArgument"

    def test_non_integer_story_length(self, client):
        response = client.post("/api/progression/project", json={"story_length": "ten"})
        assert response.status_code == 400

    def test_story_length_over_limit(self, client):
        response = client.post("/api/progression/project", json={"character": {}, "story_length": 61})
        assert response.status_code == 400
        assert response.get_json()["error"] == "InvalidArgument"

    def test_story_length_at_limit(self, client):
        response = client.post("/api/progression/project", json={"character": {}, "story_length": 60})
        assert response.status_code == 200
        assert len(response.get_json()["snapshots"]) == 60

    def test_infinite_experience_rate(self, client):
        """Test that a JSON Infinity rate is refused instead of looping forever."""
        body = '{"character": {}, "story_length": 1, "settings": {"experience_rate": Infinity, "leveling_curve": "linear"}}'
        response = client.post("/api/progression/project", data=body, content_type="application/json")
        assert response.status_code == 400
        assert response.get_json()["error"] == "InvalidSettings"

    def test_malformed_character(self, client):
        response = client.post("/api/progression/project", json={"character": {"level": 0}})
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid input"

    def test_requires_json(self, client):
        response = client.post("/api/progression/project", data="level=1")
        assert response.status_code == 400


class TestCombatRoutes:
    """Combat resolution routes."""

    def test_resolve(self, client):
        response = client.post("/api/combat/resolve", json={"action": ACTION, "seed": 3})
        assert response.status_code == 200
        outcome = response.get_json()["outcome"]
        assert outcome["damage"] >= 0
        if not outcome["hit"]:
            assert outcome["damage"] == 0

    def test_resolve_seed_repeats(self, client):
        first = client.post("/api/combat/resolve", json={"action": ACTION, "seed": 8}).get_json()
        second = client.post("/api/combat/resolve", json={"action": ACTION, "seed": 8}).get_json()
        assert first == second

    def test_simulate(self, client):
        response = client.post("/api/combat/simulate", json={"action": ACTION, "trials": 300})
        assert response.status_code == 200
        data = response.get_json()
        assert data["statistics"]["total_simulations"] == 300
        assert data["statistics"]["hits"] + data["statistics"]["misses"] == 300
        assert data["balance"]["dps_rating"] == "high"

    def test_simulate_default_trials(self, client):
        response = client.post("/api/combat/simulate", json={"action": ACTION})
        assert response.get_json()["statistics"]["total_simulations"] == 200

    def test_simulate_trials_over_limit(self, client):
        response = client.post("/api/combat/simulate", json={"action": ACTION, "trials": 10_000})
        assert response.status_code == 400

    def test_simulate_zero_trials(self, client):
        response = client.post("/api/combat/simulate", json={"action": ACTION, "trials": 0})
        assert response.status_code == 400
        assert response.get_json()["error"] == "InvalidArgument"

    def test_simulate_rejects_non_integer_seed(self, client):
        response = client.post("/api/combat/simulate", json={"action": ACTION, "trials": 10, "seed": [1]})
        assert response.status_code == 400
        assert response.get_json()["error"] == "InvalidArgument"

    def test_missing_base_damage(self, client):
        response = client.post("/api/combat/resolve", json={"action": {"name": "Empty"}})
        assert response.status_code == 400


class TestLootRoutes:
    """Loot routes."""

    def test_roll(self, client):
        response = client.post("/api/loot/roll", json={"table": TABLE, "seed": 4})
        assert response.status_code == 200
        result = response.get_json()["result"]
        assert result["selected_index"] in (0, 1)

    def test_roll_degenerate(self, client):
        response = client.post("/api/loot/roll", json={"table": {"entries": []}})
        assert response.status_code == 200
        assert response.get_json()["result"]["items"] == []

    @pytest.mark.parametrize("seed", [[1], {"value": 1}, "abc", 1.5, True])
    def test_roll_rejects_non_integer_seed(self, client, seed):
        response = client.post("/api/loot/roll", json={"table": TABLE, "seed": seed})
        assert response.status_code == 400
        assert response.get_json()["error"] == "InvalidArgument"

    def test_roll_nan_weight(self, client):
        body = '{"table": {"entries": [{"name": "Cursed Idol", "weight": NaN}]}}'
        response = client.post("/api/loot/roll", data=body, content_type="application/json")
        assert response.status_code == 400
        assert response.get_json()["error"] == "InvalidArgument"

    def test_roll_negative_weight(self, client):
        table = {"entries": [{"name": "Bad", "weight": -1}]}
        response = client.post("/api/loot/roll", json={"table": table})
        assert response.status_code == 400

    def test_analyze(self, client):
        response = client.post("/api/loot/analyze", json={"table": TABLE, "trials": 1000})
        assert response.status_code == 200
        data = response.get_json()
        assert 0 <= data["statistics"]["nothing_percentage"] <= 100
        assert data["balance"]["balance_score"] in (55, 75, 85)
        assert data["expected_value"]["average_value"] == pytest.approx(27.5)


class TestConfigRoutes:
    """Simulation config routes."""

    def test_get(self, client):
        response = client.get("/api/config/simulation")
        assert response.status_code == 200
        assert response.get_json()["config"]["combat_trials"] == 200

    def test_update(self, client):
        response = client.post("/api/config/simulation", json={"combat_trials": 50, "max_trials": 1000})
        assert response.status_code == 200
        assert client.get("/api/config/simulation").get_json()["config"]["combat_trials"] == 50

    def test_update_invalid(self, client):
        response = client.post("/api/config/simulation", json={"combat_trials": 0})
        assert response.status_code == 400

    def test_update_non_object_body(self, client):
        response = client.post("/api/config/simulation", json=[1, 2])
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid configuration"

    def test_update_story_length_over_limit(self, client):
        response = client.post("/api/config/simulation", json={"story_length": 500, "max_story_length": 100})
        assert response.status_code == 400

    def test_unknown_api_route_is_json(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.get_json()["code"] == 404
