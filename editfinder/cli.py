"""Command-line interface for editing video discovery."""

import asyncio
import json
import logging
import sys

import click

from editfinder.config import DiscoveryConfig, load_config, save_config_template
from editfinder.exceptions import DiscoveryError
from editfinder.models import SearchMode, SearchResponse
from editfinder.pipeline import DEFAULT_QUERY, QUICK_PROMPTS, DiscoveryPipeline
from editfinder.utils import setup_logging, watch_time_label


def _load(config_path, verbose: bool = False) -> DiscoveryConfig:
    """Load configuration and setup logging from it."""
    try:
        discovery_config = load_config(config_path) if config_path else DiscoveryConfig()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config")

    log_cfg = discovery_config.logging
    level = logging.DEBUG if verbose else getattr(logging, log_cfg.level.upper())
    setup_logging(
        level=level,
        log_file=log_cfg.file_path,
        max_bytes=log_cfg.max_file_size_mb * 1024 * 1024,
        backup_count=log_cfg.backup_count,
        console_output=log_cfg.console_output,
    )
    return discovery_config


async def _search_async(
    pipeline: DiscoveryPipeline, query: str, mode: SearchMode
) -> SearchResponse:
    """Helper to run one search and release the provider."""
    try:
        return await pipeline.search(query, mode)
    finally:
        await pipeline.close()


def _print_results(response: SearchResponse) -> None:
    print("\n" + "=" * 50)
    print(f"{response.type.value.upper()} FOR: {response.query}")
    print("=" * 50)
    print(f"Results: {response.total}")

    for index, video in enumerate(response.results, 1):
        print(f"\n{index:2}. {video.title}")
        print(f"    {video.channel_title} | {watch_time_label(video)}")
        print(f"    {video.watch_url}")


@click.group()
@click.version_option("1.0.0")
def cli():
    """Editing Video Discovery - Find editing tutorials and shorts on YouTube."""
    pass


@cli.command()
@click.argument("query", required=False)
@click.option("--shorts", is_flag=True, help="Search short-form clips instead of tutorials")
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON payload")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to configuration file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
def search(query, shorts, as_json, config, verbose):
    """Search YouTube for editing videos."""
    if query is None:
        query = DEFAULT_QUERY
    if not query.strip():
        raise click.UsageError("Missing search query")

    discovery_config = _load(config, verbose)
    mode = SearchMode.SHORTS if shorts else SearchMode.TUTORIALS
    pipeline = DiscoveryPipeline(discovery_config)

    try:
        response = asyncio.run(_search_async(pipeline, query, mode))
    except DiscoveryError as e:
        logging.error(f"Search failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_results(response)


@cli.command()
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to configuration file")
@click.option("--host", help="Bind address (defaults to api.host)")
@click.option("--port", "-p", type=int, help="Port (defaults to api.port)")
def serve(config, host, port):
    """Serve the search HTTP API."""
    import uvicorn

    from editfinder.api import create_app

    discovery_config = _load(config)
    app = create_app(discovery_config)
    uvicorn.run(
        app,
        host=host or discovery_config.api.host,
        port=port or discovery_config.api.port,
        log_config=None,
    )


@cli.command()
def prompts():
    """List suggested searches."""
    print(f"Default: {DEFAULT_QUERY}")
    for prompt in QUICK_PROMPTS:
        print(f"  - {prompt}")


@cli.command()
@click.option("--output", "-o", default="config_template.yaml", help="Output path for template")
def create_config(output):
    """Create a configuration file template."""
    save_config_template(output)
    print(f"Configuration template saved to: {output}")


if __name__ == "__main__":
    cli()
