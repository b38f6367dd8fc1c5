CRD_GROUP = "nmstate.io"
CRD_VERSION = "v1beta1"
CRD_PLURAL_NMSTATE = "nmstates"
CRD_KIND_NMSTATE = "NMState"

SELF_SIGN_CONFIGURATION_KEY = "selfSignConfiguration"
