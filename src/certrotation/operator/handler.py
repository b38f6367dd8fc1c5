import logging
from typing import Any, Dict

import kopf

from ..crds.const import CRD_GROUP, CRD_PLURAL_NMSTATE, CRD_VERSION, SELF_SIGN_CONFIGURATION_KEY
from ..crds.errors import InvalidManifestError
from ..crds.nmstate import SelfSignConfiguration
from .validation import (
    default_self_sign_configuration,
    error_list_to_multiline_string,
    validate_self_sign_configuration,
)


@kopf.on.validate(CRD_GROUP, CRD_VERSION, CRD_PLURAL_NMSTATE, id="self-sign-configuration")
def validate_nmstate(
    spec: Dict[str, Any],
    name: str,
    logger: logging.Logger,
    **kwargs: Any,
) -> None:
    """Reject NMState admission requests carrying an invalid selfSignConfiguration."""
    try:
        conf = SelfSignConfiguration.from_dict(spec.get(SELF_SIGN_CONFIGURATION_KEY))
    except InvalidManifestError as e:
        logger.warning(f"Rejecting NMState '{name}': {e}")
        raise kopf.AdmissionError(str(e))

    errs = validate_self_sign_configuration(conf)
    if errs:
        message = error_list_to_multiline_string(errs)
        logger.warning(f"Rejecting NMState '{name}': {message}")
        raise kopf.AdmissionError(message)


@kopf.on.create(CRD_GROUP, CRD_VERSION, CRD_PLURAL_NMSTATE, id="selfSignConfiguration")
@kopf.on.update(CRD_GROUP, CRD_VERSION, CRD_PLURAL_NMSTATE, id="selfSignConfiguration")
def resolve_self_sign_configuration(
    spec: Dict[str, Any],
    name: str,
    logger: logging.Logger,
    **kwargs: Any,
) -> Dict[str, str]:
    """
    Resolve the effective selfSignConfiguration for an NMState.

    An unset configuration falls back to the defaults. The returned mapping is
    stored by Kopf in the resource status under the handler id.
    """
    try:
        conf = SelfSignConfiguration.from_dict(spec.get(SELF_SIGN_CONFIGURATION_KEY))
    except InvalidManifestError as e:
        raise kopf.PermanentError(str(e))

    if conf.is_empty():
        logger.info(f"NMState '{name}' has no selfSignConfiguration, using defaults.")
        conf = default_self_sign_configuration()
    else:
        errs = validate_self_sign_configuration(conf)
        if errs:
            raise kopf.PermanentError(error_list_to_multiline_string(errs))

    logger.info(f"Effective selfSignConfiguration for NMState '{name}': {conf.to_dict()}")
    return conf.to_dict()
