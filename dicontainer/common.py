import inspect
from typing import Any, Callable, Dict, Optional, get_args, get_origin


def class_name(input_type):
    origin = get_origin(input_type)
    args = get_args(input_type)

    if origin is not None and args:
        # for example, this is the case for List[str], Repository[Order], etc.
        return "{}[{}]".format(
            class_name(origin),
            ", ".join("..." if arg is Ellipsis else class_name(arg) for arg in args),
        )
    try:
        return input_type.__name__
    except AttributeError:
        return str(input_type)


def inject(globalsns=None, localns=None) -> Callable[..., Any]:
    """
    Marks a class as injected. This is only necessary for classes defined in a
    function body, whose constructor annotations refer to other local names and
    are stored as strings (PEP 563): the locals are bound to the class so its
    constructor dependencies can be evaluated later.
    """
    if localns is None or globalsns is None:
        frame = inspect.currentframe()
        try:
            if localns is None:
                localns = frame.f_back.f_locals  # type: ignore
            if globalsns is None:
                globalsns = frame.f_back.f_globals  # type: ignore
        finally:
            del frame

    def decorator(f):
        f._locals = localns
        f._globals = globalsns
        return f

    return decorator


def get_obj_locals(obj) -> Optional[Dict[str, Any]]:
    return getattr(obj, "_locals", None)


def get_obj_globals(obj) -> Optional[Dict[str, Any]]:
    return getattr(obj, "_globals", None)
