"""Subscription plans and the limits they put on a tenant."""
from assetdesk.utils.policy_loader import get_plan

PLAN_FIELDS = (
    "max_rooms",
    "max_personnel",
    "asset_tracking",
    "depreciation",
    "maintenance_module",
    "reports_level",
)


def plan_limits(plan_name: str) -> dict:
    """Limits a new tenant on plan_name starts with. Raises ValueError for unknown plans."""
    plan = get_plan(plan_name)
    return {key: plan[key] for key in PLAN_FIELDS}


class PlanLimitExceeded(ValueError):
    pass


def check_capacity(tenant, resource: str, current_count: int) -> None:
    """
    resource is 'rooms' or 'personnel'. Archived records do not count
    towards current_count.
    """
    limit = getattr(tenant, f"max_{resource}")
    if current_count >= limit:
        raise PlanLimitExceeded(
            f"{resource.capitalize()} limit reached ({limit}) for your "
            f"{tenant.subscription_plan} subscription plan. "
            f"Please upgrade to add more {resource}."
        )
