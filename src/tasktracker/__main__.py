import logging

import click
import uvicorn

from tasktracker.config import Settings
from tasktracker.server.apps import TaskTrackerStarletteApplication


logger = logging.getLogger(__name__)


@click.command()
@click.option('--host', 'host', default=None, help='Interface to bind.')
@click.option('--port', 'port', type=int, default=None, help='Port to bind.')
@click.option('--log-level', 'log_level', default=None, help='Logging level.')
def main(host: str | None, port: int | None, log_level: str | None):
    """Runs the task tracker HTTP server."""
    settings = Settings.from_env()
    overrides = {
        'host': host,
        'port': port,
        'log_level': log_level,
    }
    settings = Settings.model_validate(
        settings.model_dump()
        | {key: value for key, value in overrides.items() if value is not None}
    )

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    logger.info('Starting task tracker on %s:%s', settings.host, settings.port)

    server = TaskTrackerStarletteApplication.from_settings(settings)
    uvicorn.run(
        server.build(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == '__main__':
    main()
