# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: construction of translucent objects

@applications: any
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

# internal
import translucent.omni.slog as slog
import translucent.omni.data_types.templates as templates
from translucent.omni.data_types.errors import UnknownAttributeError
from translucent.omni.data_types.registry import registry_for

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# --------------------------------------------------- Version Information -- #
VERSION = '1.0'
DEBUG_VERSION = '1.0.2'

# --------------------------------------------------------------- Logging -- #
logger = slog.Logger()

# classes nobody should instantiate directly, filled in by metaclasses.py
ABSTRACT = set()

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------- FUNCTIONS -- #
def prepare(cls):
    """everything that has to happen before an instance of cls exists"""
    if cls in ABSTRACT:
        logger.warning("Instantiation attempted of abstract class '{0}'",
                       cls.__name__)
    registry = registry_for(cls)
    if registry.is_bound(cls):
        return
    if registry.template_for(cls) is not None:
        registry.bind(cls)

def allocate(cls):
    """a bare instance of cls with empty instance storage"""
    obj = object.__new__(cls)
    vars(obj)[templates.STORAGE] = {}
    return obj

def apply_attributes(obj, attributes):
    """call the accessor named by each key with its value"""
    for name, value in attributes.items():
        method = None
        if not (name.startswith('__') and name.endswith('__')):
            try:
                method = getattr(obj, name)
            except AttributeError:
                pass
        if not callable(method):
            raise UnknownAttributeError(
                "'{0}' has no attribute accessor '{1}'"
                "".format(type(obj).__name__, name))
        method(value)
    return obj

def construct(cls, initial_attrs=None):
    """Build an instance of cls and set each of initial_attrs through its
    accessor.  Same thing as cls(**initial_attrs)."""
    return cls(**dict(initial_attrs or {}))

def clone(obj, attributes=None):
    """a new instance of obj's class, starting with a copy of the values
    obj has set for itself"""
    cls = type(obj)
    prepare(cls)
    copier = registry_for(cls).copier
    new = allocate(cls)
    storage = templates.instance_storage(obj)
    vars(new)[templates.STORAGE] = dict((key, copier(value))
                                         for key, value in storage.items())
    return apply_attributes(new, attributes or {})
