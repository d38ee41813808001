# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: turns attribute names and method prototypes into the names of
              generated methods

@applications: any
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

# built-in
import re

# internal
from translucent.omni.data_types.errors import TemplateError

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# --------------------------------------------------- Version Information -- #
VERSION = '1.0'
DEBUG_VERSION = '1.0.0'

splits_underscores = re.compile(r'^(_*)(.+)$', re.DOTALL)

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------- FUNCTIONS -- #
def make_method_name(attribute, prototype):
    """Splice an attribute name into a method prototype.  Leading
    underscores move to the front of the method name, and a capitalized
    attribute gives a capitalized method name:

    >>> make_method_name('name', 'pushAttribute')
    'pushname'
    >>> make_method_name('__name', 'attribute')
    '__name'
    >>> make_method_name('Name', 'getAttribute')
    'GetName'
    >>> make_method_name('_Name', 'setAttribute')
    '_SetName'
    """
    match = splits_underscores.match(attribute)
    if not match or match.group(2).startswith('_'):
        raise TemplateError('attribute name {0!r} has nothing but '
                            'underscores'.format(attribute))
    underscores, letters = match.groups()
    method_name = prototype.replace('attribute', letters)
    method_name = method_name.replace('Attribute', letters)
    if letters[0].isupper():
        method_name = method_name[0].upper() + method_name[1:]
    return underscores + method_name

def mangled_name(cls, name):
    """Return the name python gives `name` when it is written inside the
    body of cls (self.__name becomes self._Cls__name), or None if python
    leaves the name alone."""
    if not name.startswith('__') or name.endswith('__'):
        return None
    stripped = cls.__name__.lstrip('_')
    if not stripped:
        return None
    return '_{0}{1}'.format(stripped, name)
