import click
from flask.cli import with_appcontext
from marshmallow import ValidationError

from coachmarket.errors import Conflict
from coachmarket.extensions import db
from coachmarket.models.user import ROLE_ATHLETE, USER_ROLES
from coachmarket.schemas import SignupSchema
from coachmarket.services import signup


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables directly, without migrations."""
    db.create_all()
    click.echo("Database tables created.")


@click.command("create-user")
@click.option("--username", required=True)
@click.option("--email", required=True)
@click.option("--password", prompt=True, hide_input=True)
@click.option("--role", type=click.Choice(USER_ROLES), default=ROLE_ATHLETE, show_default=True)
@with_appcontext
def create_user_command(username, email, password, role):
    """Register an account from the command line."""
    try:
        data = SignupSchema().load(
            {"username": username, "email": email, "password": password, "role": role}
        )
        user = signup(db.session, **data)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid user data: {exc.messages}")
    except Conflict as exc:
        raise click.ClickException(str(exc))

    click.echo(f"✅ {user.role.capitalize()} created successfully!")
    click.echo(f"🆔 Id: {user.id}")
    click.echo(f"📧 Email: {user.email}")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)
