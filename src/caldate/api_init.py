"""Seeds the definition registry with the built-in calendars (import side-effect)."""
from .core.registry import set_registry
from ._bootstrap import build_registry


def reset_registry() -> None:
    """Forget custom registrations; only the built-in definitions stay decodable."""
    set_registry(build_registry())


reset_registry()
