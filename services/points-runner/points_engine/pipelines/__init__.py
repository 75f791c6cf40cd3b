# Pipelines module
from .projection_pipeline import ProjectionPipeline

__all__ = ['ProjectionPipeline']
