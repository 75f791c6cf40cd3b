# Contracts module
from .input_models import PlayerProjectionInput, ProjectionRequest
from .output_models import (
    ProjectionOutput,
    ProjectionRunResult,
    ProjectionStatus,
    PropSignalOutput,
    RejectionOutput,
)

__all__ = [
    'PlayerProjectionInput',
    'ProjectionRequest',
    'ProjectionOutput',
    'ProjectionRunResult',
    'ProjectionStatus',
    'PropSignalOutput',
    'RejectionOutput',
]
