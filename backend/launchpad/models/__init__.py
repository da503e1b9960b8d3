from launchpad.models.profile import Profile

__all__ = ["Profile"]
