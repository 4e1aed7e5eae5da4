"""
Scaffolding Property Metadata - Type Name Helpers
Renders fully-qualified and short display names for property value types.

Both helpers are pure functions of the type they are given, so the same
type always renders the same way in generated code.
"""

import enum
import types
import typing
from typing import Any, ForwardRef, Literal, Union

NoneType = type(None)

# Union[X, Y] and X | Y report different origins
_UNION_ORIGINS = (Union, types.UnionType)


def _optional_argument(tp: Any):
    """Return X for Optional[X] / Union[X, None], else None."""
    if typing.get_origin(tp) not in _UNION_ORIGINS:
        return None
    args = [arg for arg in typing.get_args(tp) if arg is not NoneType]
    if len(args) == 1 and len(typing.get_args(tp)) == 2:
        return args[0]
    return None


def _origin_name(tp: Any, qualified: bool) -> str:
    """Name of the unsubscripted generic, e.g. list or typing.Union."""
    origin = typing.get_origin(tp)
    if origin in _UNION_ORIGINS:
        return 'typing.Union' if qualified else 'Union'
    if origin is Literal:
        return 'typing.Literal' if qualified else 'Literal'
    # typing.List[int] and list[int] share the builtin origin
    return _class_name(origin, qualified)


def _class_name(tp: type, qualified: bool) -> str:
    if tp is NoneType:
        return 'None'
    name = getattr(tp, '__qualname__', None) or getattr(tp, '__name__', None) or repr(tp)
    if not qualified:
        return name
    module = getattr(tp, '__module__', None)
    return f"{module}.{name}" if module else name


def _render_argument(arg: Any, qualified: bool, literal: bool = False) -> str:
    """Render one subscript argument; Literal values and Callable parameter lists are not types."""
    if arg is Ellipsis:
        return '...'
    if isinstance(arg, list):
        return '[' + ', '.join(_render_argument(a, qualified) for a in arg) + ']'
    if isinstance(arg, enum.Enum):
        return f"{_class_name(type(arg), qualified)}.{arg.name}"
    # outside Literal a bare string is a forward reference
    if literal and isinstance(arg, (str, bytes, int, float)):
        return repr(arg)
    return _render(arg, qualified)


def _render(tp: Any, qualified: bool) -> str:
    if tp is None or tp is NoneType:
        return 'None'
    if isinstance(tp, str):
        return tp
    if isinstance(tp, ForwardRef):
        return tp.__forward_arg__
    if tp is Any:
        return 'typing.Any' if qualified else 'Any'

    inner = _optional_argument(tp)
    if inner is not None:
        prefix = 'typing.Optional' if qualified else 'Optional'
        return f"{prefix}[{_render(inner, qualified)}]"

    args = typing.get_args(tp)
    if typing.get_origin(tp) is not None and args:
        literal = typing.get_origin(tp) is Literal
        rendered = ', '.join(_render_argument(arg, qualified, literal) for arg in args)
        return f"{_origin_name(tp, qualified)}[{rendered}]"

    return _class_name(tp, qualified)


def get_full_type_name(tp: Any) -> str:
    """
    Get the fully-qualified name of a value type.

    Args:
        tp: A class, a typing construct (Optional[int], list[str]) or a
            forward-reference string

    Returns:
        Module-qualified name, e.g. "builtins.int" or
        "typing.Optional[builtins.int]"
    """
    return _render(tp, qualified=True)


def get_short_type_name(tp: Any) -> str:
    """
    Get the short display name of a value type.

    Args:
        tp: A class, a typing construct or a forward-reference string

    Returns:
        Unqualified name, e.g. "int", "Optional[int]" or "dict[str, int]"
    """
    return _render(tp, qualified=False)
