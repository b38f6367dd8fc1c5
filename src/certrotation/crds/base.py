from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from kubernetes import client


@dataclass
class ObjectMeta:
    name: str
    namespace: Optional[str] = None
    labels: Dict[str, str] = field(default_factory=dict)
    annotations: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ObjectMeta":
        # Server-populated fields (uid, resourceVersion, ...) are not modelled.
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})


class BaseCustomResource:
    group: str
    version: str
    plural: str
    kind: str
    namespaced: bool

    def __init__(
        self,
        metadata: ObjectMeta,
        spec: Dict[str, Any],
        status: Optional[Dict[str, Any]] = None,
        api: Optional[client.CustomObjectsApi] = None,
    ) -> None:
        self.metadata = metadata
        self.spec = spec
        self.status = status or {}
        self.api = api

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], api: Optional[client.CustomObjectsApi] = None
    ) -> "BaseCustomResource":
        meta = ObjectMeta.from_dict(data.get("metadata") or {"name": ""})
        return cls(
            metadata=meta,
            spec=data.get("spec") or {},
            status=data.get("status") or {},
            api=api,
        )

    @classmethod
    def get(
        cls,
        name: str,
        *,
        namespace: Optional[str] = None,
        api: Optional[client.CustomObjectsApi] = None,
    ) -> "BaseCustomResource":
        api_instance = api or client.CustomObjectsApi()
        if cls.namespaced:
            if not namespace:
                raise ValueError("Namespace is required for namespaced resources")
            data = api_instance.get_namespaced_custom_object(
                group=cls.group,
                version=cls.version,
                namespace=namespace,
                plural=cls.plural,
                name=name,
            )
        else:
            if namespace:
                raise ValueError("Cluster-scoped resources must not receive a namespace")
            data = api_instance.get_cluster_custom_object(
                group=cls.group,
                version=cls.version,
                plural=cls.plural,
                name=name,
            )
        return cls.from_dict(data, api=api_instance)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiVersion": f"{self.group}/{self.version}",
            "kind": self.kind,
            "metadata": {
                "name": self.metadata.name,
                "namespace": self.metadata.namespace,
                "labels": self.metadata.labels or None,
                "annotations": self.metadata.annotations or None,
            },
            "spec": self.spec,
            "status": self.status or None,
        }
