"""
Modeles de validation des donnees entrantes
Validation stricte des entrees joueur avant projection
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone


class PlayerProjectionInput(BaseModel):
    """Entrees d'une projection de points pour un joueur"""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="ignore")

    # Identite (affichage uniquement)
    player_name: str = Field(default="", description="Nom du joueur (affichage uniquement, non valide)")

    # Moteurs principaux
    player_line_pts: float = Field(..., description="Ligne bookmaker (points)")
    season_avg_pts: float = Field(..., description="Moyenne de points sur la saison")

    # Contexte
    is_home: bool = Field(..., description="True = domicile, False = exterieur")
    game_total_ou: float = Field(..., description="Total O/U du match")
    team_total_ou: float = Field(..., description="Total O/U de l'equipe")
    opp_pts_allowed_vs_pos: float = Field(
        ..., description="Points concedes par l'adversaire au poste (par match)"
    )

    # Optionnels: None = facteur neutre
    recent_avg_pts: Optional[float] = Field(
        default=None, description="Moyenne des N derniers matchs (defaut: moyenne saison)"
    )
    season_avg_minutes: Optional[float] = Field(default=None, description="Minutes moyennes sur la saison")
    expected_minutes: Optional[float] = Field(default=None, description="Minutes attendues ce match")
    matchup_pace: Optional[float] = Field(
        default=None, description="Rythme projete (possessions par equipe, defaut: moyenne ligue)"
    )
    is_back_to_back: bool = Field(default=False, description="Deuxieme match en deux jours")

    @property
    def resolved_recent_avg_pts(self) -> float:
        """Moyenne recente, neutralisee sur la moyenne saison si absente"""
        if self.recent_avg_pts is None:
            return self.season_avg_pts
        return self.recent_avg_pts


class ProjectionRequest(BaseModel):
    """Requete de projection batch avec metadata"""
    run_id: str = Field(..., min_length=1, description="Identifiant unique du run")
    trace_id: str = Field(..., min_length=1, description="ID de tracabilite pour correlation logs")
    profile: Optional[str] = Field(default=None, description="Profil de calibration (defaut: profil par defaut)")
    players: List[Dict[str, Any]] = Field(default_factory=list, description="Payloads joueurs bruts")
    requested_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
