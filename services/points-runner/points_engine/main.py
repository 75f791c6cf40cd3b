"""
FastAPI entrypoint pour le service points-runner
Expose health check, profils et projection de points
"""
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from typing import Optional

from points_engine import __version__
from points_engine.config import model_constants
from points_engine.config.model_constants import get_profile
from points_engine.contracts.input_models import PlayerProjectionInput, ProjectionRequest
from points_engine.contracts.output_models import ProjectionOutput, ProjectionRunResult
from points_engine.pipelines.projection_pipeline import ProjectionPipeline

# Configuration logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestion du cycle de vie de l'application"""
    logger.info(f"Points-runner demarrage (profil par defaut: {model_constants.PROJECTION_CONFIG.default_profile})")
    yield
    logger.info("Points-runner arret...")


app = FastAPI(
    title="Points-Runner NBA",
    description="Service de projection des points joueurs NBA",
    version=__version__,
    lifespan=lifespan
)


def _pipeline_for(profile: Optional[str]) -> ProjectionPipeline:
    """Construit le pipeline, 404 si le profil est inconnu"""
    try:
        return ProjectionPipeline(profile=profile)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "points-runner",
        "version": __version__
    }


@app.get("/profiles")
async def list_profiles():
    """Liste les profils de calibration disponibles"""
    config = model_constants.PROJECTION_CONFIG
    return {
        "default_profile": config.default_profile,
        "config_version": config.version,
        "profiles": {name: get_profile(name).to_dict() for name in sorted(config.profiles)}
    }


@app.post("/project", response_model=ProjectionOutput)
async def project_player(inputs: PlayerProjectionInput, profile: Optional[str] = None):
    """
    Projette les points d'un joueur

    Args:
        inputs: Entrees du joueur (validees par FastAPI, 422 sinon)
        profile: Profil de calibration (defaut: profil par defaut)

    Returns:
        ProjectionOutput avec base, multiplicateurs, projection et lean
    """
    pipeline = _pipeline_for(profile)
    output = pipeline.project_one(inputs)
    logger.info(f"Projection {inputs.player_name or 'player'}: {output.projection:.2f} (profil {pipeline.constants.name})")
    return output


@app.post("/project/batch", response_model=ProjectionRunResult)
async def project_batch(request: ProjectionRequest):
    """
    Projection batch

    Les payloads invalides sont rejetes individuellement; le run echoue
    seulement si aucun joueur n'est projetable.
    """
    logger.info(f"[{request.trace_id}] Projection request received for run {request.run_id} "
                f"with {len(request.players)} players")

    pipeline = _pipeline_for(request.profile)
    result = pipeline.project_players(
        run_id=request.run_id,
        trace_id=request.trace_id,
        players=request.players
    )

    if result.status == "failed":
        logger.error(f"[{request.trace_id}] Projection failed: {result.error_cause}")
        return JSONResponse(
            status_code=500,
            content=result.model_dump_json_safe()
        )

    return result


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8002)
