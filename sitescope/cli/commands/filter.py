"""Filter command: show which resources in a file an actor may access."""

import json
import sys
from pathlib import Path
from typing import Any

import cyclopts
import yaml

from sitescope.config import Config, configure_logging
from sitescope.domain.access.filter.pipeline import FilterPipeline
from sitescope.domain.access.filter.site_match import site_match
from sitescope.domain.access.model.actor import Actor
from sitescope.domain.access.model.document import documents_from_payloads
from sitescope.domain.access.model.value import UserId, site_ids
from sitescope.domain.shared.error import ResourceFilterError, ValidationError

app = cyclopts.App(name="filter", help="Filter a resource file by site membership")


@app.default
def run(
    resources_file: Path,
    /,
    *,
    site: list[int] | None = None,
    user: str = "cli",
    audit: bool | None = None,
) -> None:
    """Print the resources the actor may access as JSON.

    Args:
        resources_file: JSON or YAML file holding a list of resource mappings.
            A mapping declares "site_id" (one site) or "site_ids" (several).
        site: Site the actor belongs to. Repeat for several sites.
        user: Identifier of the actor, used in logs.
        audit: Log every denied resource. Defaults to filter.audit_denials.
    """
    config = Config()
    configure_logging(config.logging)

    try:
        payloads = _load_resources(resources_file)
        documents = documents_from_payloads(payloads)
        actor = Actor(user_id=UserId(user), site_ids=site_ids(*(site or [])))
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        print(f"Error: invalid input: {e}", file=sys.stderr)
        sys.exit(1)

    if audit is None:
        audit = config.filter.audit_denials
    pipeline = FilterPipeline([site_match()], audit=audit)

    try:
        allowed = pipeline.filter(actor, documents)
    except ResourceFilterError as e:
        # No partial listing: the whole request fails
        print(f"Error: cannot complete this request ({e.message})", file=sys.stderr)
        sys.exit(1)

    print(json.dumps([d.to_payload() for d in allowed], indent=2, default=str))


def _load_resources(path: Path) -> list[Any]:
    """Read a list of resource mappings from a JSON or YAML file."""
    text = path.read_text()
    data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValidationError(f"{path} must contain a list of resources")
    return data
