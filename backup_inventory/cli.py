"""Command-line interface for backup inventory."""

import logging
import sys
import click
from typing import Optional, Tuple

from .config.config_manager import ConfigManager
from .core.inventory import InventoryRunner
from .core.models import ErrorPolicy
from .core.transport import SFTPTransport
from .reporters.json_reporter import JsonReporter
from .reporters.text_reporter import TextReporter


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console logging goes to stderr, stdout carries the inventory
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


@click.group()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--log-level', default='INFO',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file',
              help='Log file path')
@click.pass_context
def cli(ctx, config_path: Optional[str], log_level: str, log_file: Optional[str]):
    """Backup Inventory - Report file counts and sizes of remote backups."""
    ctx.ensure_object(dict)

    setup_logging(log_level, log_file)

    ctx.obj['config_path'] = config_path


@cli.command()
@click.option('--output', '-o', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.option('--human-readable', '-H', is_flag=True,
              help='Show sizes as KB/MB/GB (text output only)')
@click.option('--root', 'root_path',
              help='Remote directory holding the backups')
@click.option('--exclude', '-x', 'exclude', multiple=True,
              help='Skip top-level entries starting with this prefix (repeatable)')
@click.option('--collect-skipped', is_flag=True,
              help='List paths that could not be read under each backup')
@click.pass_context
def scan(ctx, output: str, human_readable: bool, root_path: Optional[str],
         exclude: Tuple[str, ...], collect_skipped: bool):
    """Inventory every backup on the remote server."""
    try:
        config_manager = ConfigManager(ctx.obj.get('config_path'))
        config_manager.load_config()
        inventory_config = config_manager.get_inventory_config()

        error_policy = ErrorPolicy(inventory_config.get('on_error', 'skip'))
        if collect_skipped:
            error_policy = ErrorPolicy.COLLECT

        if output == 'json':
            reporter = JsonReporter()
        else:
            reporter = TextReporter(human_readable=human_readable)

        with SFTPTransport(config_manager.get_connection_config()) as transport:
            runner = InventoryRunner(
                transport,
                root_path=root_path or inventory_config.get('root_path', '/'),
                exclude_patterns=config_manager.get_exclude_patterns() + list(exclude),
                error_policy=error_policy
            )
            runner.run_and_report(reporter)

    except Exception as e:
        click.echo(f"Error during scan: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def validate_config(ctx):
    """Validate configuration file and environment."""
    try:
        config_manager = ConfigManager(ctx.obj.get('config_path'))
        config_manager.load_config()
        connection = config_manager.get_connection_config()
        inventory_config = config_manager.get_inventory_config()

        click.echo("✅ Configuration loaded successfully")

        click.echo("\n📊 Configuration Summary:")
        click.echo(f"   Server: {connection.user}@{connection.host}:{connection.port}")
        click.echo(f"   Password: {'*' * 8}")
        click.echo(f"   Root path: {inventory_config['root_path']}")

        patterns = config_manager.get_exclude_patterns()
        if patterns:
            click.echo(f"   Excluded: {', '.join(patterns)}")
        click.echo(f"   On error: {inventory_config['on_error']}")

    except Exception as e:
        click.echo(f"❌ Configuration validation failed: {e}", err=True)
        sys.exit(1)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
