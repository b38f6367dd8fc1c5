from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from .base import BaseCustomResource
from .const import (
    CRD_GROUP,
    CRD_KIND_NMSTATE,
    CRD_PLURAL_NMSTATE,
    CRD_VERSION,
    SELF_SIGN_CONFIGURATION_KEY,
)
from .errors import InvalidManifestError


@dataclass(frozen=True)
class SelfSignConfiguration:
    """
    Rotation and overlap windows for the self-signed CA and its certificates.

    Every value is a duration string such as "24h". Wire names are the
    camelCase keys used by the NMState API.
    """

    ca_rotate_interval: str = ""
    ca_overlap_interval: str = ""
    cert_rotate_interval: str = ""
    cert_overlap_interval: str = ""

    WIRE_NAMES = {
        "ca_rotate_interval": "caRotateInterval",
        "ca_overlap_interval": "caOverlapInterval",
        "cert_rotate_interval": "certRotateInterval",
        "cert_overlap_interval": "certOverlapInterval",
    }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SelfSignConfiguration":
        """
        Builds a configuration from its wire form.

        Raises:
            InvalidManifestError: If data is neither None nor a mapping.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidManifestError(
                f"{SELF_SIGN_CONFIGURATION_KEY} must be a mapping, got {type(data).__name__}"
            )
        kwargs = {}
        for attr, wire_name in cls.WIRE_NAMES.items():
            value = data.get(wire_name)
            kwargs[attr] = "" if value is None else str(value)
        return cls(**kwargs)

    def fields(self) -> Iterator[Tuple[str, str]]:
        """Yields (wire name, value) pairs in declaration order."""
        for f in dataclass_fields(self):
            yield self.WIRE_NAMES[f.name], getattr(self, f.name)

    def is_empty(self) -> bool:
        """True when no field has been set, i.e. no configuration was provided."""
        return all(value == "" for _, value in self.fields())

    def to_dict(self) -> Dict[str, str]:
        return dict(self.fields())


def self_sign_configuration_from_manifest(doc: Optional[Mapping[str, Any]]) -> SelfSignConfiguration:
    """
    Extracts a SelfSignConfiguration from a loaded YAML document.

    The document may be a full NMState manifest, a mapping with a top-level
    selfSignConfiguration key, or the bare configuration itself.

    Raises:
        InvalidManifestError: If the document or its spec is not a mapping.
    """
    if doc is None:
        return SelfSignConfiguration()
    if not isinstance(doc, Mapping):
        raise InvalidManifestError(f"manifest must be a mapping, got {type(doc).__name__}")
    if "spec" in doc:
        spec = doc.get("spec")
        if spec is None:
            return SelfSignConfiguration()
        if not isinstance(spec, Mapping):
            raise InvalidManifestError(f"spec must be a mapping, got {type(spec).__name__}")
        return SelfSignConfiguration.from_dict(spec.get(SELF_SIGN_CONFIGURATION_KEY))
    if SELF_SIGN_CONFIGURATION_KEY in doc:
        return SelfSignConfiguration.from_dict(doc.get(SELF_SIGN_CONFIGURATION_KEY))
    return SelfSignConfiguration.from_dict(doc)


class NMState(BaseCustomResource):
    group = CRD_GROUP
    version = CRD_VERSION
    plural = CRD_PLURAL_NMSTATE
    kind = CRD_KIND_NMSTATE
    namespaced = False

    @property
    def self_sign_configuration(self) -> SelfSignConfiguration:
        return SelfSignConfiguration.from_dict(self.spec.get(SELF_SIGN_CONFIGURATION_KEY))
