"""
Validation and defaulting for the NMState selfSignConfiguration.

Checks run in stages: presence, parsing, positivity, then ordering. Every
error within a stage is collected, but a failing stage stops the later ones so
that values which never parsed do not produce follow-on errors.
"""
from datetime import timedelta
from typing import Callable, Dict, Iterable, List, Optional

from ..crds.errors import (
    MissingFieldError,
    NonPositiveDurationError,
    OrderingViolationError,
    SelfSignConfigurationError,
    UnparseableDurationError,
)
from ..crds.nmstate import SelfSignConfiguration
from ..utils.time import format_duration, format_duration_ns, parse_duration_ns

CA_ROTATE_INTERVAL_DEFAULT = timedelta(hours=168)
CA_OVERLAP_INTERVAL_DEFAULT = timedelta(hours=24)
CERT_ROTATE_INTERVAL_DEFAULT = timedelta(hours=24)
CERT_OVERLAP_INTERVAL_DEFAULT = timedelta(hours=8)

# (lesser, greater): the first interval must not be longer than the second.
ORDERING_RULES = (
    ("caOverlapInterval", "caRotateInterval"),
    ("certRotateInterval", "caRotateInterval"),
    ("certOverlapInterval", "certRotateInterval"),
)


def validate_self_sign_configuration(
    conf: SelfSignConfiguration,
) -> List[SelfSignConfigurationError]:
    """
    Validate the four rotation intervals of a selfSignConfiguration.

    An entirely empty configuration is valid, since defaults apply.

    Returns:
        The errors found, in check order. An empty list means the
        configuration is valid.
    """
    if conf.is_empty():
        return []

    values = conf.to_dict()

    errs = _collect(_validate_not_empty, values.items())
    # There are empty values, don't continue
    if errs:
        return errs

    durations: Dict[str, int] = {}
    errs = _collect(
        lambda name, value: _parse_certificate_knob(name, value, durations),
        values.items(),
    )
    # If they cannot be parsed don't continue
    if errs:
        return errs

    errs = _collect(_validate_greater_than_zero, durations.items())
    # If we have a zero value don't continue
    if errs:
        return errs

    return _collect(
        lambda lesser, greater: _validate_not_longer(
            lesser, durations[lesser], greater, durations[greater]
        ),
        ORDERING_RULES,
    )


def default_self_sign_configuration() -> SelfSignConfiguration:
    return SelfSignConfiguration(
        ca_rotate_interval=format_duration(CA_ROTATE_INTERVAL_DEFAULT),
        ca_overlap_interval=format_duration(CA_OVERLAP_INTERVAL_DEFAULT),
        cert_rotate_interval=format_duration(CERT_ROTATE_INTERVAL_DEFAULT),
        cert_overlap_interval=format_duration(CERT_OVERLAP_INTERVAL_DEFAULT),
    )


def error_list_to_multiline_string(errs: Iterable[Optional[Exception]]) -> str:
    """Joins error messages with newlines, skipping None entries."""
    return "\n".join(str(err) for err in errs if err is not None)


def _collect(
    check: Callable[..., Optional[SelfSignConfigurationError]],
    args: Iterable[tuple],
) -> List[SelfSignConfigurationError]:
    errs = []
    for arg in args:
        err = check(*arg)
        if err is not None:
            errs.append(err)
    return errs


def _validate_not_empty(name: str, value: str) -> Optional[SelfSignConfigurationError]:
    if value == "":
        return MissingFieldError(name)
    return None


def _parse_certificate_knob(
    name: str, value: str, parsed: Dict[str, int]
) -> Optional[SelfSignConfigurationError]:
    try:
        parsed[name] = parse_duration_ns(value)
    except ValueError as e:
        return UnparseableDurationError(name, value, e)
    return None


def _validate_greater_than_zero(
    name: str, duration: int
) -> Optional[SelfSignConfigurationError]:
    if duration <= 0:
        return NonPositiveDurationError(name, format_duration_ns(duration))
    return None


def _validate_not_longer(
    lesser_name: str,
    lesser: int,
    greater_name: str,
    greater: int,
) -> Optional[SelfSignConfigurationError]:
    if lesser > greater:
        return OrderingViolationError(
            lesser_name, format_duration_ns(lesser), greater_name, format_duration_ns(greater)
        )
    return None
