# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: last-resort method lookup for translucent classes and their
              instances

@applications: any

@notes: resolve() is what __getattr__ calls on Translucent instances and on
        the TranslucentMeta metaclass, so it only ever sees names normal
        lookup could not find.
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

# built-in
import types

# internal
from translucent.omni.data_types.errors import NoSuchMethodError
from translucent.omni.data_types.registry import lookup_member, registry_for

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# --------------------------------------------------- Version Information -- #
VERSION = '1.0'
DEBUG_VERSION = '1.0.1'

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------- FUNCTIONS -- #
def receiver_class(receiver):
    return receiver if isinstance(receiver, type) else type(receiver)

def resolve(receiver, name):
    """Find `name` for a receiver (instance or class) which normal
    attribute lookup failed on, and return it bound to the receiver."""
    if name.startswith('__') and name.endswith('__'):
        raise AttributeError(name)
    cls = receiver_class(receiver)
    registry = registry_for(cls)

    # a class which declares its template as a class attribute is bound
    # lazily, the first time anything asks it for a missing name
    if not registry.is_bound(cls) and registry.template_for(cls) is not None:
        registry.bind(cls)
        if lookup_member(cls, name) is not None:
            return getattr(receiver, name)

    return default_method(receiver, name)

def default_method(receiver, name):
    """Return the generated accessor registered under `name` for the
    receiver's class, bound to the receiver, even when a hand-written
    method of that name hides it."""
    cls = receiver_class(receiver)
    registry = registry_for(cls)
    accessor = registry.fallback(cls, name)
    if accessor is None:
        raise NoSuchMethodError(
            "Could not access method '{0}' in the '{1}' class ({2} default "
            "methods defined)".format(name, cls.__name__,
                                      len(registry.fallbacks)))
    if not callable(accessor):
        raise NoSuchMethodError("default method '{0}.{1}' is not callable"
                                "".format(cls.__name__, name))
    return types.MethodType(accessor, receiver)
