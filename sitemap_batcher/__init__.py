# sitemap_batcher/__init__.py
"""
sitemap_batcher package initializer.
Defines package version and exposes the pipeline facade.
"""
__version__ = "0.1.0"

from sitemap_batcher.engine import Engine, PipelineResult, PipelineState  # noqa: E402

__all__ = ["__version__", "Engine", "PipelineResult", "PipelineState"]
