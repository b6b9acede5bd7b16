"""Resource filter predicates and the pipeline that applies them."""

from .pipeline import FilterPipeline, filter_resources
from .predicate import AllOf, AnyOf, Decision, Not, Predicate, all_of, any_of
from .site_match import SiteMatch, site_match

__all__ = [
    "AllOf",
    "AnyOf",
    "Decision",
    "FilterPipeline",
    "Not",
    "Predicate",
    "SiteMatch",
    "all_of",
    "any_of",
    "filter_resources",
    "site_match",
]
