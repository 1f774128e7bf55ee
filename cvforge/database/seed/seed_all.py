from flask.cli import with_appcontext
from cvforge.database.seed.seed_users import seed as seed_users
from cvforge.database.seed.seed_library import seed as seed_library
from cvforge.database.seed.seed_cvs import seed as seed_cvs
from cvforge.database.seed.seed_applications import seed as seed_applications

import click

@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_users()
    seed_library()
    seed_cvs()
    seed_applications()
    click.echo("✅ All seeders completed!")
