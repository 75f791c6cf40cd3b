"""
Projecteur de points joueur
Blend ligne/moyenne saison, ajuste par le produit borne des multiplicateurs de contexte
"""
import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from points_engine.config.model_constants import ProjectionConstants, get_profile
from points_engine.contracts.input_models import PlayerProjectionInput
from . import multipliers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointsProjection:
    """Resultat de projection de points"""
    base_points: float
    mult_home_away: float
    mult_game_total: float
    mult_team_total: float
    mult_def_vs_pos: float
    mult_recent_form: float
    mult_minutes_trend: float
    mult_pace: float
    mult_back_to_back: float
    uncapped_multiplier: float
    final_multiplier: float
    projection: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class PointsProjector:
    """
    Moteur de projection de points
    Pur et deterministe: aucune I/O, aucun etat mutable, sur pour des appels concurrents
    """

    def __init__(self, constants: Optional[ProjectionConstants] = None):
        self.constants = constants if constants is not None else get_profile()

    def project(self, inputs: PlayerProjectionInput) -> PointsProjection:
        """
        Projete les points d'un joueur

        Args:
            inputs: Entrees validees du joueur

        Returns:
            PointsProjection avec base, multiplicateurs et projection finale
        """
        c = self.constants

        base = multipliers.base_points(inputs, c)
        mult_home_away = multipliers.home_away_multiplier(inputs, c)
        mult_game_total = multipliers.game_total_multiplier(inputs, c)
        mult_team_total = multipliers.team_total_multiplier(inputs, c)
        mult_def_vs_pos = multipliers.defense_vs_pos_multiplier(inputs, c)
        mult_recent_form = multipliers.recent_form_multiplier(inputs, c)
        mult_minutes_trend = multipliers.minutes_trend_multiplier(inputs, c)
        mult_pace = multipliers.pace_multiplier(inputs, c)
        mult_back_to_back = multipliers.back_to_back_multiplier(inputs, c)

        # La base n'entre pas dans le produit
        uncapped = (
            mult_home_away
            * mult_game_total
            * mult_team_total
            * mult_def_vs_pos
            * mult_recent_form
            * mult_minutes_trend
            * mult_pace
            * mult_back_to_back
        )
        final = multipliers.clamp(uncapped, c.mult_min, c.mult_max)

        if final != uncapped:
            logger.debug(
                f"Multiplier for {inputs.player_name or 'player'} capped: "
                f"{uncapped:.4f} -> {final:.4f} (profile {c.name})"
            )

        return PointsProjection(
            base_points=base,
            mult_home_away=mult_home_away,
            mult_game_total=mult_game_total,
            mult_team_total=mult_team_total,
            mult_def_vs_pos=mult_def_vs_pos,
            mult_recent_form=mult_recent_form,
            mult_minutes_trend=mult_minutes_trend,
            mult_pace=mult_pace,
            mult_back_to_back=mult_back_to_back,
            uncapped_multiplier=uncapped,
            final_multiplier=final,
            projection=base * final,
        )


def project(
    inputs: PlayerProjectionInput,
    constants: Optional[ProjectionConstants] = None
) -> PointsProjection:
    """Raccourci: projection avec le profil donne (defaut: profil par defaut)"""
    return PointsProjector(constants).project(inputs)
