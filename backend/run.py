import click

from config import Config
from hiscores import create_app

app = create_app()


@click.command()
@click.option('--host', default='127.0.0.1', show_default=True, help='Interface to bind.')
@click.option('--port', default=Config.PORT, show_default=True, type=int, help='Port to listen on (PORT env overrides the default).')
@click.option('--debug/--no-debug', default=False, help='Run the Flask debugger and reloader.')
def serve(host, port, debug):
    """Start the high scores API."""
    app.logger.info(f"[startup] listening on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    serve()
