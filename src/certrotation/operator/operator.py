"""
Kubernetes operator for the NMState selfSignConfiguration.

The handlers are kept thin and delegate to:
- Validation and defaulting (validation.py)
- Admission and create/update handling (handler.py)
"""
import logging
import os
from typing import Any

import kopf

# NOTE: This is what registers our handlers with kopf so that
#       `kopf.run -m certrotation.operator` can work.
# ruff: noqa: F401
from . import handler
from ..crds.const import CRD_GROUP

# Operator settings
WORKER_LIMIT = int(os.environ.get("CERTROTATION_WORKER_LIMIT", 1))
WEBHOOK_PORT = os.environ.get("CERTROTATION_WEBHOOK_PORT")


@kopf.on.startup()
async def on_startup(
    settings: kopf.OperatorSettings, logger: logging.Logger, **kwargs: Any
) -> None:
    """
    Handle the startup of the operator.

    This sets operator-wide settings and, when a port is configured, the
    admission webhook server.
    """
    # The default worker limit is unbounded which means you can EASILY flood
    # your API server on restart unless you limit it.
    settings.batching.worker_limit = WORKER_LIMIT

    # All logs by default go to the k8s event api. Disable event posting to
    # reduce API load.
    settings.posting.enabled = False

    if WEBHOOK_PORT:
        settings.admission.server = kopf.WebhookServer(port=int(WEBHOOK_PORT))
        settings.admission.managed = f"selfsign.{CRD_GROUP}"
        logger.info(f"Admission webhook configured on port {WEBHOOK_PORT}.")

    logger.info("Operator started.")
