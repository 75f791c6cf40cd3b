"""
Sous-calculs du moteur de projection
Un blend de base et huit multiplicateurs centres sur 1.0
"""
from typing import Optional

from points_engine.config.model_constants import ProjectionConstants
from points_engine.contracts.input_models import PlayerProjectionInput

NEUTRAL = 1.0


def clamp(x: float, lo: float, hi: float) -> float:
    """Borne x dans [lo, hi]"""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def _relative_deviation(value: float, baseline: float) -> float:
    """(value - baseline) / baseline, 0.0 si la base est nulle ou negative"""
    if baseline <= 0.0:
        return 0.0
    return (value - baseline) / baseline


def base_points(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    """Blend ligne bookmaker / moyenne saison (pas de plafond)"""
    return (
        constants.w_base_line * inputs.player_line_pts
        + constants.w_base_season_avg * inputs.season_avg_pts
    )


def home_away_multiplier(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    # Binaire: +poids a domicile, -poids a l'exterieur
    delta = constants.w_home_away if inputs.is_home else -constants.w_home_away
    return NEUTRAL + delta


def game_total_multiplier(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    rel = _relative_deviation(inputs.game_total_ou, constants.league_avg_game_total)
    return NEUTRAL + rel * constants.w_game_total


def team_total_multiplier(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    rel = _relative_deviation(inputs.team_total_ou, constants.league_avg_team_total)
    return NEUTRAL + rel * constants.w_team_total


def defense_vs_pos_multiplier(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    """Adversaire qui concede plus que la base au poste -> bonus, moins -> penalite"""
    rel = _relative_deviation(inputs.opp_pts_allowed_vs_pos, constants.league_base_pts_allowed_pos)
    return NEUTRAL + rel * constants.w_def_vs_pos


def recent_form_multiplier(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    if constants.w_recent_form == 0.0 or inputs.season_avg_pts <= 0.0:
        return NEUTRAL
    rel = (inputs.resolved_recent_avg_pts - inputs.season_avg_pts) / inputs.season_avg_pts
    return NEUTRAL + rel * constants.w_recent_form


def minutes_trend_multiplier(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    season_minutes: Optional[float] = inputs.season_avg_minutes
    expected_minutes: Optional[float] = inputs.expected_minutes
    if season_minutes is None or expected_minutes is None:
        return NEUTRAL
    if constants.w_minutes_trend == 0.0 or season_minutes <= 0.0:
        return NEUTRAL
    rel = (expected_minutes - season_minutes) / season_minutes
    return NEUTRAL + rel * constants.w_minutes_trend


def pace_multiplier(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    if inputs.matchup_pace is None:
        return NEUTRAL
    if constants.w_pace == 0.0 or constants.league_avg_pace <= 0.0:
        return NEUTRAL
    rel = (inputs.matchup_pace - constants.league_avg_pace) / constants.league_avg_pace
    return NEUTRAL + rel * constants.w_pace


def back_to_back_multiplier(inputs: PlayerProjectionInput, constants: ProjectionConstants) -> float:
    """Penalite fixe sur un back-to-back (seul facteur non proportionnel)"""
    if not inputs.is_back_to_back or constants.w_b2b_penalty <= 0.0:
        return NEUTRAL
    return NEUTRAL - constants.w_b2b_penalty
