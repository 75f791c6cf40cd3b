"""
Gestion des rejets d'entrees joueur
Detection et categorisation des payloads non projetables
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Any, Optional, List, Tuple

from pydantic import ValidationError

from points_engine.contracts.input_models import PlayerProjectionInput


class RejectionReason(str, Enum):
    """Raisons de rejet d'un payload joueur"""
    MISSING_FIELD = "missing_field"
    INVALID_TYPE = "invalid_type"
    NON_FINITE = "non_finite"
    INVALID_PAYLOAD = "invalid_payload"


# Types d'erreur pydantic -> raison
_ERROR_TYPE_REASONS = {
    "missing": RejectionReason.MISSING_FIELD,
    "finite_number": RejectionReason.NON_FINITE,
    "model_type": RejectionReason.INVALID_PAYLOAD,
    # Contraintes de valeur
    "string_too_short": RejectionReason.INVALID_PAYLOAD,
    "string_too_long": RejectionReason.INVALID_PAYLOAD,
    "too_short": RejectionReason.INVALID_PAYLOAD,
    "too_long": RejectionReason.INVALID_PAYLOAD,
    "greater_than": RejectionReason.INVALID_PAYLOAD,
    "greater_than_equal": RejectionReason.INVALID_PAYLOAD,
    "less_than": RejectionReason.INVALID_PAYLOAD,
    "less_than_equal": RejectionReason.INVALID_PAYLOAD,
}


@dataclass
class InputRejection:
    """Rejet d'un payload joueur avec raison"""
    index: int
    player_name: Optional[str]
    reason: RejectionReason
    details: Dict[str, Any]
    rejected_at: datetime

    @property
    def rejected(self) -> bool:
        """Toujours True pour un rejet"""
        return True


def _reason_for(error: ValidationError) -> RejectionReason:
    """La premiere erreur determine la categorie"""
    errors = error.errors()
    if not errors:
        return RejectionReason.INVALID_PAYLOAD
    return _ERROR_TYPE_REASONS.get(errors[0]["type"], RejectionReason.INVALID_TYPE)


class RejectionChecker:
    """
    Verificateur des payloads joueur
    Valide une seule fois a la frontiere, le moteur recoit des entrees propres
    """

    def check(
        self,
        payload: Any,
        index: int = 0
    ) -> Tuple[Optional[PlayerProjectionInput], Optional[InputRejection]]:
        """
        Valide un payload joueur

        Args:
            payload: Donnees brutes du joueur
            index: Position dans le batch

        Returns:
            (entree validee, None) ou (None, InputRejection)
        """
        player_name = payload.get("player_name") if isinstance(payload, dict) else None

        try:
            return PlayerProjectionInput.model_validate(payload), None
        except ValidationError as e:
            return None, InputRejection(
                index=index,
                player_name=player_name,
                reason=_reason_for(e),
                details={
                    "errors": [
                        {
                            "field": ".".join(str(loc) for loc in err["loc"]),
                            "type": err["type"],
                            "message": err["msg"],
                        }
                        for err in e.errors()[:5]  # Limit details
                    ]
                },
                rejected_at=datetime.now(timezone.utc)
            )

    def check_batch(
        self,
        payloads: List[Any]
    ) -> Tuple[List[Tuple[int, PlayerProjectionInput]], List[InputRejection]]:
        """
        Valide un batch de payloads

        Returns:
            Tuple (entrees valides avec leur index, rejets)
        """
        valid: List[Tuple[int, PlayerProjectionInput]] = []
        rejections: List[InputRejection] = []

        for index, payload in enumerate(payloads):
            inputs, rejection = self.check(payload, index=index)
            if rejection is not None:
                rejections.append(rejection)
            else:
                valid.append((index, inputs))

        return valid, rejections
