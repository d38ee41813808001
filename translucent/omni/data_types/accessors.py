# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: generated accessor methods for translucent attributes

@applications: any

@notes: an Accessor is a descriptor, like a property, except that what it
        returns is a bound method.  Fetched from an instance it binds to
        the instance; fetched from the class it binds to the class.  This
        is what lets Bird.name() and Bird().name() share one accessor.
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

# built-in
import inspect
import sys
import types

# internal
import translucent.omni.data_types.templates as templates
from translucent.omni.data_types.errors import TemplateError

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# --------------------------------------------------- Version Information -- #
VERSION = '1.0'
DEBUG_VERSION = '1.0.3'

__all__ = ['Accessor', 'hybridmethod', 'synthesize']

# -------------------------------------------------------------------------- #
# ------------------------------------------------------ CLASS MECHANISMS -- #
class Accessor(object):
    """
    DESCRIPTOR:
    One generated method: an attribute, a role for that attribute, and the
    access check and scope policy picked from the attribute's name.
    Calling it runs, in order: the access check against the calling
    frame, the scope policy to find the right Slot, then the role.
    """
    def __init__(self, owner, attribute, name, prototype, role, check, scope,
                 defaults, copier):
        self.owner = owner
        self.attribute = attribute
        self.name = name
        self.prototype = prototype
        self.role = role
        self.check = check
        self.scope = scope
        # the class registry entry this accessor reads and writes
        self.defaults = defaults
        self.copier = copier
        self.__name__ = name
        self.__qualname__ = '{0}.{1}'.format(owner.__qualname__, name)
        self.__doc__ = ("generated '{0}' accessor for the {1} attribute "
                        "'{2}' of {3}".format(prototype, scope.__name__
                                              .replace('_scope', ''),
                                              attribute, owner.__name__))

    def __get__(self, obj, cls=None):
        receiver = cls if obj is None else obj
        return types.MethodType(self, receiver)

    def __call__(self, receiver, *args, **kwargs):
        self.check(self, sys._getframe(1))
        if self.role.mode == templates.WRITES_WITH_ARGS:
            writing = bool(args or kwargs)
        else:
            writing = self.role.mode == templates.WRITES
        storage = None
        if writing and not isinstance(receiver, type):
            storage = templates.instance_storage(receiver)
            if self.attribute in storage:
                storage = None
        slot = self.scope(self, receiver, writing)
        try:
            return self.role.behavior(slot, *args, **kwargs)
        except Exception:
            # a failed first write leaves the instance reading the default
            if storage is not None:
                storage.pop(self.attribute, None)
            raise

    def __repr__(self):
        return '<Accessor {0}>'.format(self.__qualname__)

class hybridmethod(object):
    """
    DESCRIPTOR:
    like classmethod, but binds to the instance when there is one."""
    def __init__(self, func):
        self.func = func
        self.__doc__ = func.__doc__
        self.__wrapped__ = func

    def __get__(self, obj, cls=None):
        return types.MethodType(self.func, cls if obj is None else obj)

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------- FUNCTIONS -- #
def synthesize(cls, attribute, name, prototype, role, defaults,
               copier=templates.copy_default):
    """Build the Accessor for one role of one attribute of cls.  Fails
    with a TemplateError if the parts can't be assembled into something
    callable, which is always a mistake in a custom method template."""
    tier = templates.access_tier(attribute)
    scope = templates.scope_of(attribute)
    check = templates.access_check(tier)
    policy = templates.scope_policy(scope)
    if check is None or policy is None:
        raise TemplateError("no {0} access check or {1} scope policy for "
                            "'{2}' of {3}".format(tier, scope, name,
                                                  cls.__name__))
    if not isinstance(role, templates.Role):
        role = templates.Role(role, templates.WRITES_WITH_ARGS)
    behavior = role.behavior
    if not callable(behavior):
        raise TemplateError("Failed synthesis of method '{0}' for {1}: "
                            "{2!r} is not callable"
                            "".format(name, cls.__name__, behavior))
    try:
        signature = inspect.signature(behavior)
    except (TypeError, ValueError):
        # builtins without a signature get the benefit of the doubt
        signature = None
    if signature is not None:
        try:
            signature.bind_partial(None)
        except TypeError as err:
            raise TemplateError("Failed synthesis of method '{0}' for {1}: "
                                "{2}".format(name, cls.__name__, err))
    return Accessor(cls, attribute, name, prototype, role, check, policy,
                    defaults, copier)
