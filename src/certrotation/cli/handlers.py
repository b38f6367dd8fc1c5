import os
from pathlib import Path
from typing import List

import yaml
from kubernetes import client, config
from rich.console import Console
from rich.markup import escape

from ..crds.const import SELF_SIGN_CONFIGURATION_KEY
from ..crds.errors import InvalidManifestError, KubeConfigError, SelfSignConfigurationError
from ..crds.nmstate import NMState, SelfSignConfiguration, self_sign_configuration_from_manifest
from ..operator.validation import (
    default_self_sign_configuration,
    validate_self_sign_configuration,
)


def load_kube_config() -> None:
    """Loads kubeconfig, respecting the KUBECONFIG environment variable."""
    try:
        config.load_kube_config(config_file=os.environ.get("KUBECONFIG"))
    except (config.ConfigException, FileNotFoundError) as e:
        raise KubeConfigError(f"Could not load Kubernetes configuration: {e}") from e


def print_defaults() -> None:
    """Prints the default selfSignConfiguration as YAML."""
    console = Console()
    defaults = default_self_sign_configuration()
    console.print(
        yaml.dump({SELF_SIGN_CONFIGURATION_KEY: defaults.to_dict()}, default_flow_style=False, sort_keys=False),
        end="",
    )


def report(conf: SelfSignConfiguration, source: str) -> List[SelfSignConfigurationError]:
    """Validates a configuration and prints the outcome."""
    console = Console()
    errs = validate_self_sign_configuration(conf)
    if errs:
        console.print(f"[red]❌ {source} has an invalid selfSignConfiguration:[/red]")
        for err in errs:
            console.print(f"[red]  - {escape(str(err))}[/red]")
    elif conf.is_empty():
        console.print(f"[green]✅ {source} has no selfSignConfiguration; defaults apply.[/green]")
    else:
        console.print(f"[green]✅ {source} has a valid selfSignConfiguration.[/green]")
    return errs


def validate_file(path: Path) -> List[SelfSignConfigurationError]:
    """
    Validates the selfSignConfiguration found in a YAML file.

    Raises:
        InvalidManifestError: If the file is not YAML or has the wrong shape.
    """
    with open(path, "r") as f:
        try:
            doc = next(yaml.safe_load_all(f), None)
        except yaml.YAMLError as e:
            raise InvalidManifestError(f"{path} is not valid YAML: {e}") from e
    try:
        conf = self_sign_configuration_from_manifest(doc)
    except InvalidManifestError as e:
        raise InvalidManifestError(f"{path}: {e}") from e
    return report(conf, str(path))


def check_nmstate(name: str) -> List[SelfSignConfigurationError]:
    """
    Fetches an NMState from the cluster and validates its selfSignConfiguration.

    Raises:
        KubeConfigError: If kubeconfig cannot be loaded.
        InvalidManifestError: If the resource spec has the wrong shape.
        client.ApiException: If the resource cannot be read.
    """
    load_kube_config()
    nmstate = NMState.get(name, api=client.CustomObjectsApi())
    return report(nmstate.self_sign_configuration, f"NMState '{name}'")
