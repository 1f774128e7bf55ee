import click
from flask.cli import with_appcontext
from flask_jwt_extended import create_access_token

from cvforge.extensions import db
from cvforge.models import User


@click.command("init-db")
@with_appcontext
def init_db():
    """Create every table that does not exist yet."""
    db.create_all()
    click.echo("✅ Database tables created")


@click.command("issue-token")
@click.argument("email")
@with_appcontext
def issue_token(email):
    """Print a bearer token for an existing user (accounts are managed elsewhere)."""
    user = User.query.filter_by(email=email).first()
    if user is None:
        raise click.ClickException(f"No user with email {email}")
    click.echo(create_access_token(identity=user.id))
