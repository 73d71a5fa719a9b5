"""Validation of target names and resolver selections.

These functions do no I/O; SesameResolver runs them before a request is
built, so every input error surfaces before the network is touched.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .exceptions import ValidationError
from .types import Resolver

DEFAULT_RESOLVERS: tuple[str, ...] = ("Simbad", "NED", "VizieR")

_SUPPORTED = frozenset(r.value for r in Resolver)


def validate_target_name(target_name: str | None) -> str:
    """
    Check that a target name is given.

    Returns:
        The name without leading and trailing white space

    Raises:
        ValidationError: if the name is None or consists of white space only
    """
    trimmed = (target_name or "").strip()
    if not trimmed:
        raise ValidationError("The target name is missing.")
    return trimmed


def validate_resolvers(resolvers: Sequence[str | Resolver]) -> list[Resolver]:
    """
    Check a resolver selection and convert it to Resolver members.

    Names are compared case-insensitively. The checks are made in this order,
    and the first failing one raises:

    1. every name is one of Simbad, NED and VizieR
    2. there is at least one name
    3. no name appears more than once

    Returns:
        The resolvers, in the order given
    """
    names = [str(r) for r in resolvers]

    unsupported = [name for name in names if name.lower() not in _SUPPORTED]
    if unsupported:
        if len(unsupported) == 1:
            prefix = "The following resolver is not supported"
        else:
            prefix = "The following resolvers are not supported"
        raise ValidationError(
            f"{prefix}: {', '.join(unsupported)}. "
            "The available resolvers are Simbad, NED and VizieR.",
            details={"unsupported": unsupported},
        )

    lower_case = [name.lower() for name in names]

    if not lower_case:
        raise ValidationError("At least one resolver must be given.")

    if len(set(lower_case)) != len(lower_case):
        raise ValidationError(
            "A resolver may be used only once in the list of resolvers.",
            details={"resolvers": names},
        )

    return [Resolver.parse(name) for name in names]


def resolver_codes(resolvers: Iterable[Resolver]) -> str:
    """Join the Sesame codes of the resolvers, such as "SNV" or "N"."""
    return "".join(resolver.code for resolver in resolvers)
