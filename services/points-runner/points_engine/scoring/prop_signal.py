"""
Generateur de lean over/under sur la ligne joueur
Compare la projection de points a la ligne bookmaker
"""
from dataclasses import dataclass

from .points_projector import PointsProjection

DEFAULT_EDGE_THRESHOLD = 1.5


@dataclass(frozen=True)
class PropSignal:
    """Lean over/under avec confiance"""
    signal: str  # "over", "under", "no_signal"
    line: float
    projection: float
    edge: float  # Difference projete vs ligne (points)
    edge_pct: float  # Edge relatif a la ligne
    confidence: float


class PropSignalGenerator:
    """
    Generateur de lean sur la ligne de points
    Aide a l'affichage uniquement, ne modifie pas la projection
    """

    def __init__(self, edge_threshold: float = DEFAULT_EDGE_THRESHOLD):
        self.edge_threshold = edge_threshold

    def generate(self, projection: PointsProjection, line: float) -> PropSignal:
        """
        Genere le lean over/under

        Args:
            projection: Projection de points du joueur
            line: Ligne bookmaker (points)

        Returns:
            PropSignal avec signal et confiance
        """
        projected = projection.projection
        edge = projected - line
        edge_pct = edge / line if line > 0 else 0.0

        if abs(edge) < self.edge_threshold:
            signal = "no_signal"
            confidence = 0.5
        else:
            signal = "over" if edge > 0 else "under"
            # Confiance basee sur l'ecart relatif (max 0.9)
            confidence = min(0.5 + abs(edge_pct) * 2, 0.9)

        return PropSignal(
            signal=signal,
            line=line,
            projection=round(projected, 2),
            edge=round(edge, 2),
            edge_pct=round(edge_pct, 4),
            confidence=round(confidence, 2)
        )
