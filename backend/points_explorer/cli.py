"""Command line interface for the points explorer backend.

Example:
    Generate the seed asset, then serve the API:
        $ points-explorer generate --output public/seed-points.json
        $ points-explorer serve --port 8000
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from points_explorer.core import config
from points_explorer.core import logger as logger_module
from points_explorer.services import seed_generator

app = typer.Typer(help="Mass points explorer backend")

logger = logger_module.get_logger(__name__)


@app.command()
def generate(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the seed asset (default: SEED_POINTS_PATH).",
    ),
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=1,
        help="Number of seed records (default: SEED_POINT_COUNT).",
    ),
) -> None:
    """Generate the deterministic seed points asset."""
    settings = config.get_settings()
    logger_module.setup_logging(settings.log_level)
    target = output or settings.seed_points_path
    points = seed_generator.generate_seed_points(settings, count=count)
    seed_generator.write_seed_points(points, target)
    logger.info("Wrote %d seed points to %s", len(points), target)
    typer.echo(f"Wrote {len(points)} seed points to {target}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("points_explorer.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
