"""Error hierarchy for sitescope.

Error layers:
- SitescopeError: Base class for all sitescope errors
- DomainError: Invalid input and failures of the filtering rules themselves
- InfrastructureError: Problems with the environment, such as bad configuration

Filtering errors are never converted into an allow or deny decision. Callers
are expected to turn them into a generic request failure.
"""


class SitescopeError(Exception):
    """Base class for all sitescope errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(SitescopeError):
    """Base class for domain errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class ResourceFilterError(DomainError):
    """A predicate could not decide allow or deny for a resource.

    Fatal to the filtering call that raised it, not to the process.
    """


class AmbiguousOwnershipError(ResourceFilterError):
    """A single-site resource reported a null site identifier."""


class IncompatibleResourceError(ResourceFilterError):
    """A resource does not report the site information a predicate needs."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(SitescopeError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
