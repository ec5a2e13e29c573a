import sys

import click

from lostfound import check_database, create_app, db
from lostfound.reports.services import seed_categories

app = create_app()


@app.cli.command('drop-db')
def drop_db():
    """Drops all tables in the database."""
    db.drop_all()
    click.echo("Dropped all tables.")


@app.cli.command('create-db')
def create_db():
    """Creates all tables in the database."""
    db.create_all()
    click.echo("Created all tables.")


@app.cli.command('reinitialize-db')
def reinitialize_db():
    """Drops and recreates all tables in the database."""
    db.drop_all()
    click.echo("Dropped all tables.")
    db.create_all()
    click.echo("Created all tables.")


@app.cli.command('seed-categories')
def seed_categories_command():
    """Adds the fixed item categories."""
    added = seed_categories(db.session)
    click.echo(f"Added {added} categories.")


@app.cli.command('check-db')
def check_db():
    """Checks that the configured database answers."""
    if check_database(app):
        click.echo("Database connection OK.")
    else:
        click.echo("Database connection failed, see the log for details.", err=True)
        sys.exit(1)


if __name__ == '__main__':
    app.run(debug=app.config['DEBUG'], port=3000)
