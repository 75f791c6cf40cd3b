"""
Profile Coherence Test

This test verifies that the runtime constants match the shipped YAML profiles,
and that every profile produces the documented reference projection shape.

Run with: pytest tests/integration/test_profile_coherence.py -v
"""

from pathlib import Path

import pytest
import yaml

from points_engine.config.model_constants import DEFAULT_CONFIG_PATH, get_profile, load_profiles
from points_engine.contracts.input_models import PlayerProjectionInput
from points_engine.scoring.points_projector import PointsProjector
from tests.factories import create_mock_player

project_root = Path(__file__).parent.parent.parent


def load_yaml_config():
    """Load configuration from the shipped YAML file."""
    with open(DEFAULT_CONFIG_PATH, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


class TestPythonConfigLoading:
    """Test that Python correctly loads the profiles from YAML."""

    def test_yaml_ships_inside_package(self):
        """Verify the YAML file lives in the package so installs carry it."""
        package_dir = project_root / "services" / "points-runner" / "points_engine"
        assert DEFAULT_CONFIG_PATH.resolve().parent.parent == package_dir.resolve()

    def test_every_yaml_profile_is_loaded(self):
        """Verify every profile in YAML is available at runtime."""
        yaml_config = load_yaml_config()
        assert set(load_profiles()) == set(yaml_config['profiles'])

    @pytest.mark.parametrize("profile_name", sorted(load_yaml_config()['profiles']))
    def test_profile_values_match_yaml(self, profile_name):
        """Verify weights, baselines and caps match YAML for each profile."""
        raw = load_yaml_config()['profiles'][profile_name]
        c = get_profile(profile_name)

        assert c.w_base_line == raw['base_blend']['line']
        assert c.w_base_season_avg == raw['base_blend']['season_avg']
        assert c.w_home_away == raw['weights']['home_away']
        assert c.w_def_vs_pos == raw['weights']['def_vs_pos']
        assert c.w_b2b_penalty == raw['weights']['b2b_penalty']
        assert c.league_avg_pace == raw['baselines']['pace']
        assert c.league_base_pts_allowed_pos == raw['baselines']['pts_allowed_pos']
        assert c.mult_min == raw['caps']['min']
        assert c.mult_max == raw['caps']['max']


class TestProfilesEndToEnd:
    """Test that every profile honours the projection invariants."""

    @pytest.mark.parametrize("profile_name", sorted(load_yaml_config()['profiles']))
    def test_baseline_player_only_moves_on_home_away(self, profile_name):
        """A player on every league baseline only gets the home/away bump."""
        c = get_profile(profile_name)
        out = PointsProjector(c).project(PlayerProjectionInput(**create_mock_player()))

        assert out.base_points == pytest.approx(c.w_base_line * 25.0 + c.w_base_season_avg * 23.0)
        assert out.uncapped_multiplier == pytest.approx(1.0 + c.w_home_away)
        assert out.projection == out.base_points * out.final_multiplier
        assert c.mult_min <= out.final_multiplier <= c.mult_max
