# ---------------------------------------------------------------------------- #
# ------------------------------------------------------------------ HEADER -- #
"""
@organization: Kludgeworks LLC

@description: translucent attributes: class-wide defaults which instances
              can override

@applications: any
"""
# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

from .errors import *
from .metaclasses import *
from .registry import (TranslucentRegistry, REGISTRY, registry_for, bind,
                       forget, rebind)
from .factory import construct
from .naming import make_method_name
from .templates import (access_check, scope_policy, method_templates,
                        datatype_of, access_tier, scope_of,
                        register_method_template, register_datatype,
                        READS, WRITES, WRITES_WITH_ARGS)
