"""Result objects produced by q-value / false discovery rate estimation.

Tidiers read these objects but never build or validate them. Any object that
exposes the expected fields by attribute or mapping key is accepted, so the
same code works for ``QValueResult`` instances, plain dictionaries loaded from
JSON, and third-party result classes.

Field names follow Python conventions (``pi0_lambda``), but the dotted names
used by the R ``qvalue`` package (``pi0.lambda``) are accepted as aliases.
``lambda`` is a Python keyword, so ``QValueResult`` stores it as ``lambda_``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

__all__ = ["MissingFieldError", "QValueResult", "REQUIRED_FIELDS", "get_field"]

REQUIRED_FIELDS = ("pvalues", "qvalues", "lfdr", "lambda", "pi0")

# Lookup order for each logical field name
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "lambda": ("lambda", "lambda_"),
    "pi0_lambda": ("pi0_lambda", "pi0.lambda"),
    "pi0_smooth": ("pi0_smooth", "pi0.smooth"),
}

_MISSING = object()


class MissingFieldError(LookupError):
    """Raised when a required field is absent from a result object."""

    def __init__(self, field: str) -> None:
        """Initialize with the logical name of the missing field."""
        super().__init__(f"Result object has no field '{field}'")
        self.field = field


def get_field(result: Any, name: str, *, required: bool = True) -> Any:
    """Look up a logical field on a result object.

    Mappings are searched by key, anything else by attribute. A value of
    ``None`` counts as absent.

    Args:
        result: Result object (mapping or object with attributes)
        name: Logical field name (e.g., "pi0_smooth")
        required: Raise if the field is absent instead of returning None

    Returns:
        Field value, or None for an absent optional field

    Raises:
        MissingFieldError: If a required field is absent

    """
    for key in _FIELD_ALIASES.get(name, (name,)):
        if isinstance(result, Mapping):
            value = result.get(key, _MISSING)
        else:
            value = getattr(result, key, _MISSING)
        if value is not _MISSING and value is not None:
            return value

    if required:
        raise MissingFieldError(name)
    return None


class QValueResult(BaseModel):
    """Output of a q-value estimation run.

    Attributes:
        pvalues: Original p-values, one per tested record.
        qvalues: Q-values, same length and order as ``pvalues``.
        lfdr: Local false discovery rates, same length and order as ``pvalues``.
        lambda_: Tuning parameter values swept while estimating pi0.
        pi0_lambda: Raw pi0 estimate at each lambda (may be absent).
        pi0_smooth: Spline-smoothed pi0 estimate at each lambda. Only present
            when the smoother estimation method was used.
        pi0: Final chosen pi0 estimate.

    """

    model_config = ConfigDict(frozen=True)

    pvalues: tuple[float, ...] = Field(..., description="Original p-values")
    qvalues: tuple[float, ...] = Field(..., description="Computed q-values")
    lfdr: tuple[float, ...] = Field(..., description="Local false discovery rates")
    lambda_: tuple[float, ...] = Field(
        ...,
        validation_alias=AliasChoices("lambda", "lambda_"),
        serialization_alias="lambda",
        description="Tuning parameter values",
    )
    pi0_lambda: tuple[float, ...] | None = Field(
        default=None,
        validation_alias=AliasChoices("pi0_lambda", "pi0.lambda"),
        description="Raw pi0 estimate per lambda",
    )
    pi0_smooth: tuple[float, ...] | None = Field(
        default=None,
        validation_alias=AliasChoices("pi0_smooth", "pi0.smooth"),
        description="Smoothed pi0 estimate per lambda",
    )
    pi0: float = Field(..., description="Chosen pi0 estimate")

    @property
    def smoothed(self) -> bool:
        """Whether the smoother estimation method was used."""
        return self.pi0_smooth is not None
