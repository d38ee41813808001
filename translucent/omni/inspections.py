# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgworks LLC

@description: Inspections provides interfaces to the inspect python module,
              with enhancements for speed and efficiency.

@applications: Any

"""
# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #
# built-in
import types
import weakref

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# ---------------------------------------------------------- Version Info -- #
VERSION = '1.2'
DEBUG_VERSION = '1.2.1'

# class -> ids of the code objects in its body, see class_code()
_code_cache = weakref.WeakKeyDictionary()

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------ STACK INFO -- #
def get_mod_trace(frame):
    """Return the name of each module enclosing this frame.  This
    function is used in the slog module for blazing-fast Logger lookup.
    See slog for more details.
    """
    # ------------------- Determine Stack Depth ---------------------------- #
    _frame = frame
    frame_count = 0
    while _frame:
        frame_count += 1
        _frame = _frame.f_back
    mods = [None] * frame_count
    # ------------------- Build Info List ---------------------------------- #
    i = 0
    while frame:
        mods[i] = frame.f_globals.get('__name__')
        i += 1
        frame = frame.f_back
    return mods

# ------------------------------------------------------------- Iterators -- #
def walk_frames(frame):
    while frame:
        yield frame
        frame = frame.f_back

def external_frame(frame, package):
    """Return the first frame, starting at the given one, whose module is
    not part of the given package.  None if the stack runs out first."""
    prefix = package + '.'
    for frm in walk_frames(frame):
        mod_name = module_name(frm)
        if mod_name != package and not mod_name.startswith(prefix):
            return frm
    return None

# -------------------------------------------------------------------------- #
# ----------------------------------------------------- FRAME INFORMATION -- #

# ------------------------------------------------ Code Object Attributes -- #
def func_name(frame):
    return frame.f_code.co_name

def file_name(frame):
    return frame.f_code.co_filename

def line_no(frame):
    return frame.f_lineno

# -------------------------------------------------------- Globals Lookup -- #
def module_name(frame):
    return frame.f_globals.get('__name__', '__main__')

def describe_frame(frame):
    """'module.function' for the given frame, or a placeholder when the
    frame is unknown"""
    if frame is None:
        return '<unknown>'
    return '{0}.{1}'.format(module_name(frame), func_name(frame))

# -------------------------------------------------------------------------- #
# ---------------------------------------------------------- CODE OBJECTS -- #
def nested_code(code):
    """Generator:
    yield the given code object and every code object compiled inside of
    it (lambdas, closures, comprehensions and generator expressions)"""
    yield code
    for const in code.co_consts:
        if isinstance(const, types.CodeType):
            for inner in nested_code(const):
                yield inner

def member_functions(member, seen=None):
    """Generator:
    yield the plain functions behind a class member, unwrapping static
    and class methods, properties and decorated functions.  Decorators
    which don't set __wrapped__ are followed through their closures."""
    seen = set() if seen is None else seen
    if isinstance(member, (staticmethod, classmethod)):
        member = member.__func__
    if isinstance(member, property):
        for func in (member.fget, member.fset, member.fdel):
            if func is not None:
                for inner in member_functions(func, seen):
                    yield inner
        return
    if member is None or id(member) in seen:
        return
    seen.add(id(member))
    if isinstance(member, types.FunctionType):
        yield member
        for cell in member.__closure__ or ():
            try:
                contents = cell.cell_contents
            except ValueError:
                # empty cell
                continue
            if isinstance(contents, (types.FunctionType, staticmethod,
                                     classmethod)):
                for inner in member_functions(contents, seen):
                    yield inner
    for inner in member_functions(getattr(member, '__wrapped__', None), seen):
        yield inner

def class_code(cls):
    """Return the ids of the code objects defined in the body of cls.
    The result is cached until forget_class_code(cls) is called."""
    try:
        return _code_cache[cls]
    except KeyError:
        pass
    codes = set()
    for member in vars(cls).values():
        for func in member_functions(member):
            codes.update(id(code) for code in nested_code(func.__code__))
    _code_cache[cls] = codes
    return codes

def forget_class_code(cls):
    """drop the cached code ids of cls, after its members change"""
    _code_cache.pop(cls, None)

def all_subclasses(cls):
    """cls followed by every class deriving from it, depth-first"""
    family = [cls]
    for sub in type.__subclasses__(cls):
        for klass in all_subclasses(sub):
            if klass not in family:
                family.append(klass)
    return family

def frame_in_classes(frame, classes):
    """Return the first of the given classes whose body defines the code
    running in frame, or None."""
    if frame is None:
        return None
    code = frame.f_code
    for cls in classes:
        if id(code) in class_code(cls):
            return cls
    return None
