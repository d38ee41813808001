# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: the building blocks translucent accessors are assembled from.

@applications: any

@notes: every generated accessor is made out of three parts, looked up in
        the tables below:

        * an ACCESS CHECK, picked by the underscores leading the attribute
          name (public, protected, private)
        * a SCOPE, picked by the case of the first letter of the attribute
          name (class or instance)
        * a ROLE, one per method generated for the attribute's datatype.
          The key of each role is a method name prototype, where the word
          'attribute' (or 'Attribute') stands in for the attribute name.

        Roles are plain functions which receive a Slot, a handle on the
        place where the value lives, followed by the caller's arguments.
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

# built-in
import copy
import re
from collections import namedtuple
from collections.abc import MutableMapping, MutableSequence

# internal
import translucent.omni.inspections as inspections
from translucent.omni.data_types.errors import AccessViolation

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# --------------------------------------------------- Version Information -- #
VERSION = '1.0'
DEBUG_VERSION = '1.0.2'

# frames from inside this package are skipped when looking for the caller
PACKAGE = __name__.split('.')[0]

# name of the per-instance dictionary of overridden values
STORAGE = '_translucent_storage'

# ---------------------------------------------------------- Enumerations -- #
PUBLIC = 'public'
PROTECTED = 'protected'
PRIVATE = 'private'

CLASS = 'class'
INSTANCE = 'instance'

DEFAULT = 'default'
SEQUENCE = 'sequence'
MAPPING = 'mapping'

# role modes: does a call count as a write for the instance scope?
READS = 0
WRITES = 1
WRITES_WITH_ARGS = 2

# ------------------------------------------------------- Name Conventions -- #
is_private = re.compile(r'^__')
is_protected = re.compile(r'^_')
is_class_scoped = re.compile(r'^_*[A-Z]')

# ------------------------------------------------------- Data Structures -- #
Role = namedtuple('Role', ['behavior', 'mode'])

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------------ SLOT -- #
class Slot(object):
    """A handle on one value inside of a storage dictionary, either the
    class-wide defaults or an instance's own values.  Roles mutate
    slot.value in place, so the change always lands in the right store."""
    __slots__ = ('store', 'key')

    def __init__(self, store, key):
        self.store = store
        self.key = key

    @property
    def value(self):
        return self.store.get(self.key)

    @value.setter
    def value(self, value):
        self.store[self.key] = value

    def __repr__(self):
        return '<Slot {0!r}: {1!r}>'.format(self.key, self.value)

def instance_storage(obj):
    """the dictionary of values an instance has set for itself"""
    return vars(obj).setdefault(STORAGE, {})

def copy_default(value):
    """the default copier: mutable containers are copied (shallow) so that
    an instance never edits the class default in place; anything else is
    shared."""
    if isinstance(value, (MutableSequence, MutableMapping)):
        return copy.copy(value)
    return value

# -------------------------------------------------------------------------- #
# --------------------------------------------------------- ACCESS CHECKS -- #
def check_public(accessor, frame):
    return

def check_protected(accessor, frame):
    caller = inspections.external_frame(frame, PACKAGE)
    family = inspections.all_subclasses(accessor.owner)
    if inspections.frame_in_classes(caller, family) is None:
        raise AccessViolation(PROTECTED, accessor.name, accessor.owner,
                              inspections.describe_frame(caller))

def check_private(accessor, frame):
    caller = inspections.external_frame(frame, PACKAGE)
    if inspections.frame_in_classes(caller, [accessor.owner]) is None:
        raise AccessViolation(PRIVATE, accessor.name, accessor.owner,
                              inspections.describe_frame(caller))

ACCESS_CHECKS = {PUBLIC: check_public,
                 PROTECTED: check_protected,
                 PRIVATE: check_private}

# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- SCOPES -- #
def class_scope(accessor, receiver, writing):
    """class-scoped attributes always live in the class defaults"""
    return Slot(accessor.defaults, accessor.attribute)

def instance_scope(accessor, receiver, writing):
    """translucent attributes read the class default until the instance
    writes its own value.  The first write copies the default into the
    instance, and from then on the instance value is used."""
    attribute = accessor.attribute
    if isinstance(receiver, type):
        return Slot(accessor.defaults, attribute)
    storage = instance_storage(receiver)
    if writing and attribute not in storage:
        storage[attribute] = accessor.copier(accessor.defaults.get(attribute))
    if writing or attribute in storage:
        return Slot(storage, attribute)
    return Slot(accessor.defaults, attribute)

SCOPES = {CLASS: class_scope,
          INSTANCE: instance_scope}

# -------------------------------------------------------------------------- #
# ----------------------------------------------------------------- ROLES -- #

# ------------------------------------------------------------- Any Value -- #
def get_or_set(slot, *value):
    if len(value) > 1:
        raise TypeError("accessor for '{0}' takes at most one value "
                        "({1} given)".format(slot.key, len(value)))
    if value:
        slot.value = value[0]
    return slot.value

# ------------------------------------------------------------- Sequences -- #
def _sequence(slot):
    if slot.value is None:
        slot.value = []
    return slot.value

def append_items(slot, *values):
    seq = _sequence(slot)
    seq.extend(values)
    return len(seq)

def remove_last(slot):
    seq = slot.value
    if not seq:
        return None
    return seq.pop()

def remove_first(slot):
    seq = slot.value
    if not seq:
        return None
    return seq.pop(0)

def prepend_items(slot, *values):
    seq = _sequence(slot)
    for value in reversed(values):
        seq.insert(0, value)
    return len(seq)

def splice_items(slot, offset, length=None, *values):
    """remove `length` items starting at `offset`, put `values` in their
    place, and return the removed items.  A negative offset counts from
    the end, a missing length runs to the end, and a negative length
    leaves that many items at the end."""
    seq = _sequence(slot)
    size = len(seq)
    start = offset + size if offset < 0 else offset
    start = max(0, min(start, size))
    if length is None:
        stop = size
    elif length < 0:
        stop = max(start, size + length)
    else:
        stop = min(size, start + length)
    removed = [seq[i] for i in range(start, stop)]
    for _ in range(stop - start):
        del seq[start]
    for i, value in enumerate(values):
        seq.insert(start + i, value)
    return removed

def slice_items(slot, *indexes):
    seq = slot.value or []
    size = len(seq)
    return [seq[i] if -size <= i < size else None for i in indexes]

# -------------------------------------------------------------- Mappings -- #
def _mapping(slot):
    if slot.value is None:
        slot.value = {}
    return slot.value

def delete_keys(slot, *keys):
    mapping = slot.value
    if mapping is None:
        return [None] * len(keys)
    return [mapping.pop(key, None) for key in keys]

def set_items(slot, *pairs, **items):
    if len(pairs) % 2:
        raise TypeError("keys and values for '{0}' must come in pairs"
                        "".format(slot.key))
    mapping = _mapping(slot)
    updates = list(zip(pairs[::2], pairs[1::2])) + list(items.items())
    for key, value in updates:
        mapping[key] = value
    # each key once, in the order first given
    return list(dict.fromkeys(key for key, _ in updates))

def get_keys(slot, *keys):
    mapping = slot.value or {}
    return [mapping.get(key) for key in keys]

# -------------------------------------------------------- Method Tables -- #
METHOD_TEMPLATES = {
    DEFAULT: {
        'attribute': Role(get_or_set, WRITES_WITH_ARGS),
    },
    SEQUENCE: {
        'attribute': Role(get_or_set, WRITES_WITH_ARGS),
        'appendAttribute': Role(append_items, WRITES),
        'removeLastAttribute': Role(remove_last, WRITES),
        'removeFirstAttribute': Role(remove_first, WRITES),
        'prependAttribute': Role(prepend_items, WRITES),
        'spliceAttribute': Role(splice_items, WRITES),
        'sliceAttribute': Role(slice_items, READS),
    },
    MAPPING: {
        'attribute': Role(get_or_set, WRITES_WITH_ARGS),
        'deleteAttribute': Role(delete_keys, WRITES),
        'setAttribute': Role(set_items, WRITES),
        'getAttribute': Role(get_keys, READS),
    },
}

# datatype tags, checked in order against a default value
DATATYPES = [(SEQUENCE, (MutableSequence,)),
             (MAPPING, (MutableMapping,))]

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- LOOKUPS -- #
def access_check(tier):
    """the access check for 'public', 'protected' or 'private'"""
    return ACCESS_CHECKS.get(tier)

def scope_policy(scope):
    """the storage policy for 'class' or 'instance' scope"""
    return SCOPES.get(scope)

def method_templates(datatype=None):
    """Return the roles generated for the given datatype: the default
    roles, with the datatype's own roles merged over them.  An unknown
    datatype has no roles at all."""
    datatype = datatype or DEFAULT
    if datatype not in METHOD_TEMPLATES:
        return {}
    merged = dict(METHOD_TEMPLATES[DEFAULT])
    merged.update(METHOD_TEMPLATES[datatype])
    return merged

def datatype_of(value):
    for tag, types_ in DATATYPES:
        if isinstance(value, types_):
            return tag
    return None

def access_tier(attribute):
    if is_private.match(attribute):
        return PRIVATE
    if is_protected.match(attribute):
        return PROTECTED
    return PUBLIC

def scope_of(attribute):
    return CLASS if is_class_scoped.match(attribute) else INSTANCE

# ------------------------------------------------------------ Extensions -- #
def register_method_template(datatype, prototype, behavior,
                             mode=WRITES_WITH_ARGS):
    """add (or replace) a role for a datatype.  Only classes bound after
    the call pick it up."""
    METHOD_TEMPLATES.setdefault(datatype, {})[prototype] = Role(behavior,
                                                                 mode)

def register_datatype(tag, *types_):
    """teach datatype_of() a new tag.  Newer tags win over older ones."""
    DATATYPES.insert(0, (tag, types_))
    METHOD_TEMPLATES.setdefault(tag, {})
