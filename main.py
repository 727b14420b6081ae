#!/usr/bin/env python3
"""
Catalog - Family / Product Import Service
==========================================

Single-command run:  python main.py
Command-line import: flask --app main import-catalog FAMILIES.csv PRODUCTS.csv

See config.py for all environment-variable tunables.
"""

import logging
from pathlib import Path

import click
from flask import Flask

import config
from db import init_db
from api import api_bp


def create_app(db_url: str | None = None) -> Flask:
    """Flask application factory."""

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.MAX_UPLOAD_SIZE

    # ── Initialise database ─────────────────────────────────────────
    init_db(db_url or config.DB_URL)

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)

    # ── CLI ─────────────────────────────────────────────────────────
    app.cli.add_command(import_catalog)

    return app


@click.command("import-catalog")
@click.argument("families_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("products_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def import_catalog(families_csv: Path, products_csv: Path):
    """Import a families CSV and a products CSV into the database."""
    from import_engine import run_import, CsvFormatError, ImportAbortedError

    try:
        result = run_import(families_csv.read_bytes(), products_csv.read_bytes())
    except CsvFormatError as exc:
        raise click.ClickException(str(exc))
    except ImportAbortedError as exc:
        raise click.ClickException(f"{exc} (nothing was imported)")

    for key, value in result.stats.to_dict().items():
        click.echo(f"  {key:<20} {value}")
    for kind, path in result.failure_files.items():
        if path:
            click.echo(f"  {kind} failures → {path}")
    click.echo(f"  Done in {result.duration_ms} ms")


def main():
    print("=" * 56)
    print("  Catalog - Family / Product Import Service")
    print("=" * 56)

    app = create_app()
    print(f"  Database: {config.DB_URL}")
    print(f"  Failure reports: {config.FAILURE_DIR}")

    print(f"\n  http://{config.HOST}:{config.PORT}/api/v1/health")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
