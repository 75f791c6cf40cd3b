"""
Formatage texte des projections
Base et projection a 2 decimales, multiplicateurs a 4 decimales
"""
from typing import List

from points_engine.config.model_constants import ProjectionConstants
from points_engine.contracts.output_models import ProjectionOutput, ProjectionRunResult

_MULTIPLIER_LABELS = [
    ("Home/Away", "mult_home_away"),
    ("Game Total (OU)", "mult_game_total"),
    ("Team Total (OU)", "mult_team_total"),
    ("Def vs Position", "mult_def_vs_pos"),
    ("Recent Form", "mult_recent_form"),
    ("Minutes Trend", "mult_minutes_trend"),
    ("Pace", "mult_pace"),
    ("Back-to-Back", "mult_back_to_back"),
]


def format_projection(output: ProjectionOutput, constants: ProjectionConstants) -> str:
    """
    Rend le rapport d'une projection

    Args:
        output: Projection d'un joueur
        constants: Profil utilise (pour afficher les bornes)

    Returns:
        Rapport multi-lignes
    """
    lines: List[str] = [
        f"Projection for {output.player_name or 'player'}",
        f"Base points (blend): {output.base_points:.2f}",
        "Multipliers:",
    ]
    for label, attr in _MULTIPLIER_LABELS:
        lines.append(f"  {label:<18}: {getattr(output, attr):.4f}")

    lines.append(f"Uncapped Multiplier : {output.uncapped_multiplier:.4f}")
    lines.append(
        f"Final Multiplier    : {output.final_multiplier:.4f}  "
        f"(capped to [{constants.mult_min:.2f}, {constants.mult_max:.2f}])"
    )
    lines.append(f"Projected Points    : {output.projection:.2f}")

    if output.signal is not None:
        lines.append(
            f"Lean vs line        : {output.signal.signal} "
            f"(line {output.signal.line:.2f}, edge {output.signal.edge:+.2f}, "
            f"confidence {output.signal.confidence:.2f})"
        )

    return "\n".join(lines)


def format_run_summary(result: ProjectionRunResult) -> str:
    """Resume d'un run batch: statut, compteurs, rejets"""
    stats = result.stats
    lines = [
        f"Run {result.run_id} [{result.status}] profile={result.profile} "
        f"projected={stats.get('projected', 0)}/{stats.get('total', 0)} "
        f"rejected={stats.get('rejected', 0)}"
    ]
    for rejection in result.rejections:
        name = rejection.player_name or f"#{rejection.index}"
        lines.append(f"  rejected {name}: {rejection.reason}")
    if result.error_cause:
        lines.append(f"  error: {result.error_cause}")
    return "\n".join(lines)
