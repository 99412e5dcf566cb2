"""Development server command that brings the schema up to date first."""

from django.core.management import call_command
from django.core.management.commands.runserver import Command as RunServer
from django.db import DatabaseError


class Command(RunServer):
    """Runserver that applies pending migrations before serving.

    If the database is unreachable the server still starts; the health
    endpoints then report it as unhealthy.
    """

    help = "Apply migrations, then start the development server"

    def check_migrations(self, *_args, **_kwargs):
        """Apply migrations instead of warning about them."""
        try:
            call_command("migrate", interactive=False, verbosity=0)
        except DatabaseError as e:
            self.stdout.write(
                self.style.WARNING(f"Skipping migrations, database unavailable: {e}")
            )
            return
        self.stdout.write(self.style.SUCCESS("Database schema is up to date"))
