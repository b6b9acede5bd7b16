"""Main CLI application using Cyclopts.

The CLI is a thin wrapper for checking resource files against an actor's
site memberships. All filtering logic lives in sitescope.domain.
"""

import cyclopts

from sitescope.cli.commands import config as config_cmd
from sitescope.cli.commands import filter as filter_cmd

app = cyclopts.App(
    name="sitescope",
    help="Site-membership resource filtering - CLI",
)

app.command(filter_cmd.app, name="filter")
app.command(config_cmd.app, name="config")
