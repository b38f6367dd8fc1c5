# NOTE: This is what registers our operator's handlers with kopf so that
#       `kopf.run -m certrotation.operator` can work.
# flake8: noqa: F401
from .operator import on_startup
from .handler import resolve_self_sign_configuration
from .handler import validate_nmstate
