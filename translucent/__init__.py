# ---------------------------------------------------------------------------- #
# ------------------------------------------------------------------ HEADER -- #
"""
@organization: Kludgeworks LLC

@description: translucent, a base class for translucency

@applications: any
"""
# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

from translucent.omni.data_types import (
    Translucent, TranslucentMeta, TranslucentRegistry, REGISTRY,
    registry_for, bind, forget, rebind, construct, make_method_name,
    access_check, scope_policy, method_templates, datatype_of, access_tier,
    scope_of, register_method_template, register_datatype, READS, WRITES,
    WRITES_WITH_ARGS, TranslucentError, TemplateError, AccessViolation,
    UnknownAttributeError, NoSuchMethodError)

# --------------------------------------------------- Version Information -- #
VERSION = '1.0'
