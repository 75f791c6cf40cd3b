"""
Module de projection de points joueur
Blend de base, multiplicateurs de contexte, lean over/under
"""
from .points_projector import PointsProjector, PointsProjection, project
from .prop_signal import PropSignalGenerator, PropSignal
from .rejections import RejectionChecker, InputRejection, RejectionReason

__all__ = [
    'PointsProjector',
    'PointsProjection',
    'project',
    'PropSignalGenerator',
    'PropSignal',
    'RejectionChecker',
    'InputRejection',
    'RejectionReason',
]
