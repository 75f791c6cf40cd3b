"""
Modeles de sortie du moteur et du pipeline de projection
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any
from datetime import datetime, timezone
from enum import Enum


class ProjectionStatus(str, Enum):
    """Statuts possibles d'un run de projection"""
    PENDING = "pending"
    VALIDATING = "validating"
    PROJECTING = "projecting"
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


class PropSignalOutput(BaseModel):
    """Lean over/under par rapport a la ligne"""
    signal: str = Field(..., pattern=r'^(over|under|no_signal)$')
    line: float
    projection: float
    edge: float
    edge_pct: float
    confidence: float = Field(..., ge=0.0, le=1.0)


class ProjectionOutput(BaseModel):
    """Resultat complet d'une projection joueur"""
    player_name: str = ""
    profile: str

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

    signal: Optional[PropSignalOutput] = None


class RejectionOutput(BaseModel):
    """Payload joueur rejete a la validation"""
    index: int = Field(..., ge=0)
    player_name: Optional[str] = None
    reason: str
    details: Dict[str, Any] = Field(default_factory=dict)


class ProjectionRunResult(BaseModel):
    """Resultat d'une execution de projection batch"""
    status: str = Field(..., pattern=r'^(success|partial|failed)$')
    run_id: str
    trace_id: str
    profile: str
    projections: List[ProjectionOutput] = Field(default_factory=list)
    rejections: List[RejectionOutput] = Field(default_factory=list)
    stats: Dict[str, int] = Field(default_factory=dict)
    projected_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    error_cause: Optional[str] = Field(default=None, description="Cause explicite en cas d'erreur")

    def model_dump_json_safe(self) -> Dict[str, Any]:
        """Convertit en dict JSON-serializable"""
        data = self.model_dump()
        data['projected_at'] = self.projected_at.isoformat()
        return data
