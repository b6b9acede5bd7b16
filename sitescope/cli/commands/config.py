"""Config inspection commands."""

import cyclopts

from sitescope.config import Config

app = cyclopts.App(name="config", help="Inspect sitescope configuration")


@app.command
def show() -> None:
    """Print the effective configuration as JSON.

    Values come from SITESCOPE_* environment variables, a .env file and the
    YAML file named by SITESCOPE_CONFIG_FILE, in that order of priority.
    """
    config = Config()
    print(config.model_dump_json(indent=2))
