# src/itemstream/cli.py
"""itemstream Command Line Interface.

Entry point for the itemstream CLI tool.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import structlog
import typer
from pydantic import ValidationError

from itemstream import __version__
from itemstream.contracts import (
    EndOfInput,
    ItemStreamError,
    StreamInitError,
    StreamRestoreError,
)
from itemstream.core.checkpoint import CheckpointStore
from itemstream.core.config import ItemStreamSettings, load_settings
from itemstream.core.reader import CheckpointedReader
from itemstream.plugins.config_base import PluginConfigError
from itemstream.plugins.manager import PluginManager

logger = structlog.get_logger()

app = typer.Typer(
    name="itemstream",
    help="itemstream: restartable sequential readers.",
    no_args_is_help=True,
)

checkpoint_app = typer.Typer(help="Inspect and clear stored checkpoints.")
app.add_typer(checkpoint_app, name="checkpoint")


def configure_logging(verbose: bool) -> None:
    """Send structured logs to stderr so stdout carries only items."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"itemstream version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log reader events to stderr.",
    ),
) -> None:
    """itemstream: restartable sequential readers."""
    configure_logging(verbose)


def _load_settings_or_exit(settings: str) -> ItemStreamSettings:
    try:
        return load_settings(Path(settings))
    except FileNotFoundError:
        typer.echo(f"Error: Settings file not found: {settings}", err=True)
        raise typer.Exit(1) from None
    except ValidationError as e:
        typer.echo("Configuration errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(1) from None


def _build_reader(config: ItemStreamSettings) -> CheckpointedReader:
    manager = PluginManager()
    manager.register_builtin_plugins()
    try:
        adapter = manager.create_adapter(config.source.plugin, config.source.options)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(1) from None
    except PluginConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    return CheckpointedReader.from_settings(adapter, config.reader)


def _read_items(
    reader: CheckpointedReader,
    store: CheckpointStore,
    job_key: str,
    interval: int,
    limit: int | None,
) -> dict[str, Any]:
    """Drive one read run: print items, checkpoint every ``interval`` items."""
    context = store.load(job_key)
    emitted = 0
    try:
        reader.open(context)
        while limit is None or emitted < limit:
            try:
                item = reader.read()
            except EndOfInput:
                break
            typer.echo(json.dumps(item, default=str))
            emitted += 1
            if emitted % interval == 0:
                reader.checkpoint(context)
                store.save(job_key, context)
        reader.checkpoint(context)
        store.save(job_key, context)
        position = reader.items_read
    finally:
        reader.close(context)
    return {"emitted": emitted, "position": position}


@app.command()
def read(
    settings: str = typer.Option(
        ...,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Stop after this many items (the position is still checkpointed).",
    ),
) -> None:
    """Read items as JSON lines, resuming from the stored checkpoint."""
    config = _load_settings_or_exit(settings)
    reader = _build_reader(config)

    with CheckpointStore(config.checkpoint.url) as store:
        try:
            result = _read_items(
                reader,
                store,
                config.checkpoint.job_key,
                config.checkpoint.interval,
                limit,
            )
        except StreamInitError as e:
            typer.echo(f"Error opening source: {e} ({e.__cause__})", err=True)
            raise typer.Exit(1) from None
        except StreamRestoreError as e:
            typer.echo(f"Error resuming from checkpoint: {e} ({e.__cause__})", err=True)
            typer.echo(
                f"The input no longer matches the checkpoint. Clear it with:\n"
                f"  itemstream checkpoint clear -s {settings}",
                err=True,
            )
            raise typer.Exit(1) from None
        except ItemStreamError as e:
            typer.echo(f"Error while reading: {e}", err=True)
            raise typer.Exit(1) from None

    logger.info(
        "Read run finished",
        stream=config.reader.stream_name,
        emitted=result["emitted"],
        position=result["position"],
    )
    typer.echo(
        f"Read {result['emitted']} items; position {result['position']}", err=True
    )


@app.command()
def plugins() -> None:
    """List registered source adapters."""
    manager = PluginManager()
    manager.register_builtin_plugins()
    typer.echo("SOURCE ADAPTERS:")
    for adapter_cls in manager.get_adapters():
        seekable = "advance" in vars(adapter_cls)
        mode = "seek" if seekable else "reread"
        typer.echo(f"  {adapter_cls.name:<12} v{adapter_cls.plugin_version}  restart: {mode}")


@checkpoint_app.command("show")
def checkpoint_show(
    settings: str = typer.Option(
        ...,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
) -> None:
    """Show the stored checkpoint context for the configured job."""
    config = _load_settings_or_exit(settings)
    with CheckpointStore(config.checkpoint.url) as store:
        context = store.load(config.checkpoint.job_key)
    if not context:
        typer.echo(f"No checkpoint stored for job '{config.checkpoint.job_key}'")
        return
    for key in sorted(context):
        typer.echo(f"{key} = {context[key]}")


@checkpoint_app.command("clear")
def checkpoint_clear(
    settings: str = typer.Option(
        ...,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
) -> None:
    """Delete the stored checkpoint so the next run starts from the beginning."""
    config = _load_settings_or_exit(settings)
    with CheckpointStore(config.checkpoint.url) as store:
        removed = store.delete(config.checkpoint.job_key)
    typer.echo(f"Removed {removed} entries for job '{config.checkpoint.job_key}'")


if __name__ == "__main__":
    app()
