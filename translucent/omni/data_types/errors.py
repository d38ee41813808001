# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: exception types raised by translucent classes

@applications: any
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# --------------------------------------------------- Version Information -- #
VERSION = '1.0'
DEBUG_VERSION = '1.0.0'

__all__ = ['TranslucentError', 'TemplateError', 'AccessViolation',
           'UnknownAttributeError', 'NoSuchMethodError']

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- CLASSES -- #
class TranslucentError(Exception):
    """base class for everything raised by the translucency machinery"""

class TemplateError(TranslucentError, TypeError):
    """a malformed attribute template, or a method template that can't be
    turned into a working accessor"""

class AccessViolation(TranslucentError):
    """a protected or private accessor was called from outside of the
    classes allowed to use it"""
    def __init__(self, tier, method, cls, caller):
        self.tier = tier
        self.method = method
        self.cls = cls
        self.caller = caller
        super(AccessViolation, self).__init__(
            "Illegal access to {0} method '{1}' of '{2}' from '{3}'"
            "".format(tier, method, cls.__name__, caller))

class UnknownAttributeError(TranslucentError, AttributeError):
    """construction was given an attribute the class has no accessor for"""

class NoSuchMethodError(TranslucentError, AttributeError):
    """neither normal lookup nor the fallback registry knows the method"""
