"""
Strategy registry.

Strategy modules register their class with @register_strategy at import
time; the CLI and the settings layer look them up by name.
"""

from typing import Dict, List, Type

from .base import SolverStrategy

# Strategy used when neither the command line nor config.json names one
DEFAULT_STRATEGY = "first"

_REGISTRY: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Raises:
        ValueError: If another class is already registered under that name
    """
    existing = _REGISTRY.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Strategy name '{cls.name}' is already taken by {existing.__name__}")
    _REGISTRY[cls.name] = cls
    return cls


def create_strategy(name: str) -> SolverStrategy:
    """
    Instantiate the strategy registered as name ("first" or "all").

    Raises:
        ValueError: If no strategy has that name
    """
    try:
        cls = _REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(_REGISTRY))
        raise ValueError(f"Unknown strategy '{name}' (known: {known})") from None
    return cls()


def get_strategy_names() -> List[str]:
    return list(_REGISTRY)


def describe_strategies() -> str:
    """One "name: description" line per registered strategy, for --help."""
    return "\n".join(f"  {name}: {cls.description}" for name, cls in _REGISTRY.items())
