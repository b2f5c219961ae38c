"""CLI entry point for screen-to-code."""

from __future__ import annotations

import sys

import click

from screen_to_code import __version__


def _load_configs(config_path: str | None, overrides: dict | None = None):
    from screen_to_code.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        load_configs,
    )

    try:
        return load_configs(config_path, overrides=overrides)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """screen-to-code -- turn reference page screenshots into HTML/Tailwind code."""


@cli.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option('--host', default=None, help='Bind address (default from config: 127.0.0.1).')
@click.option('--port', default=None, type=int, help='Bind port (default from config: 3000).')
def serve(config_path, host, port):
    """Run the proxy endpoint (POST /api/openai)."""
    from screen_to_code.l1_entities.errors import MissingApiKeyError  # noqa: PLC0415 -- deferred: not needed for --help
    from screen_to_code.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        ProxySettings,
    )

    config, infra = _load_configs(config_path)
    try:
        settings = ProxySettings.from_infra(infra, config)
    except MissingApiKeyError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    import uvicorn  # noqa: PLC0415 -- deferred: server stack only loaded for `serve`

    from screen_to_code.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: server stack only loaded for `serve`
        ProxyContainer,
    )
    from screen_to_code.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_stream_logging,
    )

    setup_stream_logging()
    container = ProxyContainer(settings)
    _preflight_provider(container.completion_client)
    uvicorn.run(
        container.build_app(),
        host=host or infra.server.host,
        port=port or infra.server.port,
    )


@cli.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option('--proxy-url', default=None, help='Proxy endpoint URL (e.g. http://127.0.0.1:3000/api/openai).')
def compose(config_path, proxy_url):
    """Open the Composer TUI."""
    overrides: dict = {}
    if proxy_url:
        overrides['composer'] = {'proxy_url': proxy_url}
    config, _ = _load_configs(config_path, overrides=overrides if overrides else None)

    from screen_to_code.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred: platformdirs not loaded on --help
    from screen_to_code.l4_frameworks_and_drivers.apps.composer import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        ComposerApp,
    )
    from screen_to_code.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        ComposerContainer,
    )

    container = ComposerContainer(config)
    app = ComposerApp(config=config, controller=container.controller, log_dir=LOG_DIR)
    app.run()


def _preflight_provider(client) -> bool:
    ok, err = client.check_connectivity()
    if not ok:
        click.echo(f'Warning: completion API not reachable ({err}). Requests will fail.', err=True)
    return ok
