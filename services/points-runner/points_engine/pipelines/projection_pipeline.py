"""
Pipeline de projection batch
Orchestre validation des entrees, projection des points et lean over/under
"""
import logging
from typing import Any, List, Optional

from points_engine.config import model_constants
from points_engine.config.model_constants import ProjectionConstants, get_profile
from points_engine.contracts.input_models import PlayerProjectionInput
from points_engine.contracts.output_models import (
    ProjectionOutput,
    ProjectionRunResult,
    ProjectionStatus,
    PropSignalOutput,
    RejectionOutput,
)
from points_engine.scoring.points_projector import PointsProjector
from points_engine.scoring.prop_signal import PropSignalGenerator
from points_engine.scoring.rejections import RejectionChecker, InputRejection

logger = logging.getLogger(__name__)


class ProjectionPipeline:
    """
    Pipeline de projection de points
    Valide une fois a la frontiere puis projette chaque joueur valide
    """

    def __init__(
        self,
        profile: Optional[str] = None,
        constants: Optional[ProjectionConstants] = None,
        edge_threshold: Optional[float] = None
    ):
        self.constants = constants if constants is not None else get_profile(profile)
        self.edge_threshold = (
            edge_threshold if edge_threshold is not None
            else model_constants.PROJECTION_CONFIG.signal.edge_threshold
        )

        # Sous-composants
        self.projector = PointsProjector(self.constants)
        self.signal_generator = PropSignalGenerator(edge_threshold=self.edge_threshold)
        self.rejection_checker = RejectionChecker()

    def project_one(self, inputs: PlayerProjectionInput) -> ProjectionOutput:
        """Projette un joueur deja valide et attache son lean"""
        projection = self.projector.project(inputs)
        signal = self.signal_generator.generate(projection, inputs.player_line_pts)

        return ProjectionOutput(
            player_name=inputs.player_name,
            profile=self.constants.name,
            signal=PropSignalOutput(
                signal=signal.signal,
                line=signal.line,
                projection=signal.projection,
                edge=signal.edge,
                edge_pct=signal.edge_pct,
                confidence=signal.confidence
            ),
            **projection.to_dict()
        )

    def project_players(
        self,
        run_id: str,
        trace_id: str,
        players: List[Any]
    ) -> ProjectionRunResult:
        """
        Execute la projection sur un batch de joueurs

        Args:
            run_id: Identifiant du run
            trace_id: ID de tracabilite
            players: Payloads joueurs bruts

        Returns:
            ProjectionRunResult avec statut, projections, rejets
        """
        logger.info(f"[trace:{trace_id}] Starting projection for run {run_id} with {len(players)} players "
                    f"(profile {self.constants.name})")

        stats = {
            "total": len(players),
            "valid": 0,
            "rejected": 0,
            "projected": 0
        }
        status = ProjectionStatus.VALIDATING
        projections: List[ProjectionOutput] = []
        rejections: List[InputRejection] = []

        try:
            # 1. Valider les entrees
            valid_inputs, rejections = self.rejection_checker.check_batch(players)
            stats["valid"] = len(valid_inputs)
            stats["rejected"] = len(rejections)

            for rejection in rejections:
                logger.warning(f"[trace:{trace_id}] Player #{rejection.index} rejected: {rejection.reason.value}")

            # 2. Projeter les joueurs valides
            status = ProjectionStatus.PROJECTING
            for _, inputs in valid_inputs:
                projections.append(self.project_one(inputs))
            stats["projected"] = len(projections)

            if players and not projections:
                status = ProjectionStatus.FAILED
                error_cause = "All player payloads were rejected"
            elif rejections:
                status = ProjectionStatus.PARTIAL
                error_cause = None
            else:
                status = ProjectionStatus.SUCCESS
                error_cause = None

        except Exception as e:
            logger.error(f"[trace:{trace_id}] Projection failed during {status.value}: {e}")
            status = ProjectionStatus.FAILED
            error_cause = str(e)

        if status == ProjectionStatus.FAILED:
            # En cas d'echec: aucune projection partielle n'est publiee
            projections = []
            stats["projected"] = 0
            logger.error(f"[trace:{trace_id}] Run {run_id} failed: {error_cause}")
        else:
            logger.info(f"[trace:{trace_id}] Projection completed: {stats['projected']}/{stats['total']} players")

        return ProjectionRunResult(
            status=status.value,
            run_id=run_id,
            trace_id=trace_id,
            profile=self.constants.name,
            projections=projections,
            rejections=[self._rejection_output(r) for r in rejections],
            stats=stats,
            error_cause=error_cause
        )

    @staticmethod
    def _rejection_output(rejection: InputRejection) -> RejectionOutput:
        return RejectionOutput(
            index=rejection.index,
            player_name=rejection.player_name if isinstance(rejection.player_name, str) else None,
            reason=rejection.reason.value,
            details=rejection.details
        )
