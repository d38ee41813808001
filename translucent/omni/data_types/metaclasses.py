# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: Translucent, an abstract base class for classes with
              translucent attributes

@applications: any

@notes: A translucent attribute has a class-wide default.  Every instance
        reads the default until it sets a value of its own; from then on
        the instance keeps its own value, and changes to the default no
        longer show through.  Attributes whose first letter is a capital
        are class data only, and never stored on the instance.

        A class hands in its template (attribute names and defaults) in
        one of three ways:

        # ------------------------ Example Code -------------------------- #
        class Bird(Translucent, template={'name': 'sparrow'}):
            pass

        class Bird(Translucent):
            Bird = {'name': 'sparrow'}

        class Bird(Translucent):
            pass
        Bird.register({'name': 'sparrow'})
        # ---------------------------------------------------------------- #

        bird = Bird()
        bird.name()             # 'sparrow'
        bird.name('robin')      # the instance has its own value now
        Bird.name()             # still 'sparrow'
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

# internal
import translucent.omni.inspections as inspections
import translucent.omni.data_types.dispatch as dispatch
import translucent.omni.data_types.factory as factory
import translucent.omni.data_types.templates as templates
from translucent.omni.data_types.accessors import hybridmethod
from translucent.omni.data_types.registry import REGISTRY, registry_for

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# --------------------------------------------------- Version Information -- #
VERSION = '1.1'
DEBUG_VERSION = '1.1.1'

__all__ = ['TranslucentMeta', 'Translucent']

# -------------------------------------------------------------------------- #
# ----------------------------------------------------------- METACLASSES -- #
class TranslucentMeta(type):
    """Binds classes created with a template keyword, runs the factory's
    preparation before each instance is made, and sends failed lookups on
    the class to the fallback dispatcher."""
    def __new__(mcs, name, bases, dct, template=None, **kwargs):
        return super(TranslucentMeta, mcs).__new__(mcs, name, bases, dct,
                                                   **kwargs)

    def __init__(cls, name, bases, dct, template=None, **kwargs):
        super(TranslucentMeta, cls).__init__(name, bases, dct, **kwargs)
        if template is not None:
            registry_for(cls).bind(cls, template)

    def __call__(cls, *args, **kwargs):
        factory.prepare(cls)
        return type.__call__(cls, *args, **kwargs)

    def __getattr__(cls, name):
        return dispatch.resolve(cls, name)

    # access checks cache the code found in a class body
    def __setattr__(cls, name, value):
        super(TranslucentMeta, cls).__setattr__(name, value)
        inspections.forget_class_code(cls)

    def __delattr__(cls, name):
        super(TranslucentMeta, cls).__delattr__(name)
        inspections.forget_class_code(cls)

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- CLASSES -- #
class Translucent(object, metaclass=TranslucentMeta):
    """Abstract base class for translucent attributes.  Subclass it, give
    it a template, and call the generated accessors.  Keyword arguments
    to the constructor are passed to the accessors of the same name."""
    translucent_registry = REGISTRY

    def __new__(cls, *args, **kwargs):
        return factory.allocate(cls)

    def __init__(self, **attributes):
        factory.apply_attributes(self, attributes)

    def __getattr__(self, name):
        return dispatch.resolve(self, name)

    def __repr__(self):
        return '<{0} {1!r}>'.format(type(self).__name__,
                                    templates.instance_storage(self))

    @classmethod
    def register(cls, template):
        """bind the class with the given template; does nothing if the
        class is already bound"""
        return registry_for(cls).bind(cls, template)

    @hybridmethod
    def supermethod(self, name):
        """the generated accessor called `name`, bound to this instance (or
        class), for use by methods which override it:

        def name(self, *value):
            return self.supermethod('name')(*value).title()
        """
        return dispatch.default_method(self, name)

    def clone(self, **attributes):
        """a new instance carrying a copy of the values this one has set"""
        return factory.clone(self, attributes)

factory.ABSTRACT.add(Translucent)
