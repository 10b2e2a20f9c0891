"""
Resource ownership check.
"""


def is_owner(resource_owner_id: str, requesting_user_id: str) -> bool:
    """True when the requesting user owns the resource."""
    return resource_owner_id == requesting_user_id
