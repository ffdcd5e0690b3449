"""Internal utilities for fuzzytree."""

from typing import Union

from fuzzytree.enums import Algorithm, CostModel
from fuzzytree.exceptions import AlgorithmError, ValidationError

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)

VALID_COST_MODELS = frozenset(c.value for c in CostModel)


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    The ``damerau`` alias resolves to ``damerau_levenshtein``.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Damerau")
        'damerau_levenshtein'
    """
    if isinstance(algorithm, Algorithm):
        name = algorithm.value
    elif isinstance(algorithm, str):
        name = algorithm.lower()
        if name not in VALID_ALGORITHMS:
            raise AlgorithmError(
                f"Unknown algorithm: '{algorithm}'. "
                f"Valid options: {sorted(VALID_ALGORITHMS)}"
            )
    else:
        raise TypeError(
            f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
        )

    if name == Algorithm.DAMERAU.value:
        return Algorithm.DAMERAU_LEVENSHTEIN.value
    return name


def normalize_cost_model(model: Union[str, CostModel]) -> str:
    """Convert CostModel enum to string, or validate a cost model name.

    Hyphens, camel case and Pascal case are tolerated, so ``"caseInsensitive"``,
    ``"CaseInsensitive"`` and ``"case-insensitive"`` all resolve to
    ``"case_insensitive"``.

    Raises:
        AlgorithmError: If the cost model is not recognized.
        TypeError: If model is not a string or CostModel enum.
    """
    if isinstance(model, CostModel):
        return model.value

    if isinstance(model, str):
        name = model.replace("-", "_").lower()
        if name in VALID_COST_MODELS:
            return name
        # camelCase or PascalCase spelling
        name = "".join(f"_{c.lower()}" if c.isupper() else c for c in model).lstrip("_")
        if name in VALID_COST_MODELS:
            return name
        raise AlgorithmError(
            f"Unknown cost model: '{model}'. "
            f"Valid options: {sorted(VALID_COST_MODELS)}"
        )

    raise TypeError(
        f"cost model must be str or CostModel enum, got {type(model).__name__}"
    )


def require_str(value: object, name: str) -> str:
    """Return value unchanged if it is a string, raise ValidationError otherwise."""
    if value is None:
        raise ValidationError(f"{name} must not be None")
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be str, got {type(value).__name__}")
    return value


def require_non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValidationError(f"{name} must be >= 0, got {value}")
    return value


__all__ = [
    "normalize_algorithm",
    "normalize_cost_model",
    "require_str",
    "require_non_negative",
    "VALID_ALGORITHMS",
    "VALID_COST_MODELS",
]
