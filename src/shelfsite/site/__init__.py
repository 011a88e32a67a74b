"""Site readiness validation and provisioning."""

from shelfsite.site.provisioning import InitializationResult, SiteProvisioner
from shelfsite.site.validation import SiteReadinessValidator, SiteValidation

__all__ = [
    "InitializationResult",
    "SiteProvisioner",
    "SiteReadinessValidator",
    "SiteValidation",
]
