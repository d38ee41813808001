# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: the registry of translucent classes, and the binder which
              generates and installs their accessors

@applications: any

@notes: a registry holds two tables:

        * classes:   class -> {attribute: class-wide default}
        * fallbacks: (class, method name) -> generated Accessor

        Binding a class fills both.  Generated accessors are only installed
        on the class when no hand-written method of the same name is
        visible, but every one of them is kept in the fallback table so an
        overriding method can still get at the default behavior (see
        dispatch.py).
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

# built-in
import threading
from collections.abc import Mapping

# internal
import translucent.omni.slog as slog
import translucent.omni.data_types.templates as templates
from translucent.omni.data_types.accessors import Accessor, synthesize
from translucent.omni.data_types.errors import TemplateError
from translucent.omni.data_types.naming import make_method_name, mangled_name

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# --------------------------------------------------- Version Information -- #
VERSION = '1.1'
DEBUG_VERSION = '1.1.0'

# --------------------------------------------------------------- Logging -- #
logger = slog.Logger()

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------- FUNCTIONS -- #
def lookup_member(cls, name):
    """Return the member called `name` from the first class in cls.__mro__
    which defines it, without going through __getattr__.  None if no
    class does."""
    for klass in cls.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return None

def is_user_defined(cls, name):
    """True if a member called `name` is visible on cls and was not
    generated for some translucent class"""
    for klass in cls.__mro__:
        if name in vars(klass):
            return not isinstance(vars(klass)[name], Accessor)
    return False

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- CLASSES -- #
class TranslucentRegistry(object):
    """Owns the class-wide defaults and the generated accessors of every
    class bound through it.  There is usually only the one, REGISTRY,
    created when this module is imported."""
    def __init__(self, copier=templates.copy_default):
        # copier decides how a default is duplicated into the class entry
        # and into an instance on its first write
        self.copier = copier
        self.classes = {}
        self.fallbacks = {}
        self.lock = threading.RLock()

    # ------------------------------------------------------------ Lookup -- #
    def is_bound(self, cls):
        return cls in self.classes

    def entry(self, cls):
        """the class-wide defaults of cls, or None if it isn't bound"""
        return self.classes.get(cls)

    def fallback(self, cls, name):
        """Return the accessor generated under `name` for cls or the
        nearest of its bases which has one, None if there isn't one."""
        for klass in cls.__mro__:
            accessor = self.fallbacks.get((klass, name))
            if accessor is not None:
                return accessor
        return None

    def template_for(self, cls):
        """the template a class declares for itself: a mapping stored on the
        class under the class's own name (class Bird: Bird = {...})"""
        template = vars(cls).get(cls.__name__)
        if isinstance(template, Mapping):
            return template
        return None

    # ----------------------------------------------------------- Binding -- #
    def bind(self, cls, template=None):
        """Generate accessors for every attribute of cls's template, and
        install the ones which don't collide with hand-written methods.
        Returns the number of methods installed.

        Binding happens once per class.  A bound class is skipped, even
        if a different template is passed in; use rebind() to start over.
        """
        if template is not None and not isinstance(template, Mapping):
            raise TemplateError("Template argument must be a mapping if "
                                "present, not {0}"
                                "".format(type(template).__name__))
        with self.lock:
            if cls in self.classes:
                logger.debug("'{0}' is already bound, not building "
                             "accessors", cls.__name__)
                return 0
            if template is None:
                template = self.template_for(cls)
                if template is None:
                    logger.debug("'{0}' has no template", cls.__name__)
                    return 0
            # make sure every name is usable before anything is touched
            for attribute in template:
                if not isinstance(attribute, str):
                    raise TemplateError("attribute names must be strings, "
                                        "not {0!r}".format(attribute))
                make_method_name(attribute, 'attribute')

            logger.debug("binding '{0}' ({1} attributes)",
                         cls.__name__, len(template))
            defaults = self.classes[cls] = {}
            generated = []
            try:
                for attribute, value in template.items():
                    defaults[attribute] = self.copier(value)
                    roles = templates.method_templates(
                        templates.datatype_of(value))
                    for prototype, role in sorted(roles.items()):
                        name = make_method_name(attribute, prototype)
                        accessor = synthesize(cls, attribute, name, prototype,
                                              role, defaults, self.copier)
                        generated.append(accessor)
            except Exception:
                del self.classes[cls]
                raise
            return sum(self._install(cls, accessor) for accessor in generated)

    def _install(self, cls, accessor):
        """record the accessor as a fallback, and put it on the class
        unless that would hide a hand-written method"""
        names = [accessor.name]
        alias = mangled_name(cls, accessor.name)
        if alias:
            names.append(alias)
        for name in names:
            self.fallbacks[(cls, name)] = accessor
        taken = [name for name in names if is_user_defined(cls, name)]
        if taken:
            logger.debug("'{0}.{1}' is already defined, keeping it",
                         cls.__name__, taken[0])
            return 0
        for name in names:
            setattr(cls, name, accessor)
        logger.debug("generated '{0}.{1}'", cls.__name__, accessor.name)
        return 1

    def forget(self, cls):
        """Drop everything known about cls: its defaults, its fallbacks, and
        every generated accessor still installed on it.  Returns the number
        of accessors removed from the class."""
        with self.lock:
            if self.classes.pop(cls, None) is None:
                return 0
            removed = 0
            for key in [key for key in self.fallbacks if key[0] is cls]:
                accessor = self.fallbacks.pop(key)
                if vars(cls).get(key[1]) is accessor:
                    delattr(cls, key[1])
                    if key[1] == accessor.name:
                        removed += 1
            logger.info("forgot '{0}' ({1} accessors removed)",
                        cls.__name__, removed)
            return removed

    def rebind(self, cls, template=None):
        """forget cls, then bind it again (with a new template if given)"""
        with self.lock:
            self.forget(cls)
            return self.bind(cls, template)

    def __repr__(self):
        return '<TranslucentRegistry: {0} classes>'.format(len(self.classes))

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------- SINGLETON -- #
REGISTRY = TranslucentRegistry()

def registry_for(cls):
    """the registry a class asks for through its translucent_registry
    attribute, or the shared one"""
    registry = lookup_member(cls, 'translucent_registry')
    return registry if isinstance(registry, TranslucentRegistry) else REGISTRY

def bind(cls, template=None):
    return registry_for(cls).bind(cls, template)

def forget(cls):
    return registry_for(cls).forget(cls)

def rebind(cls, template=None):
    return registry_for(cls).rebind(cls, template)
