"""Function Values & Combinators — tupling, currying, partial application, composition.

Invariants:
    - Every combinator is pure: it never mutates the function it receives
      and always returns a new callable
    - compose(f, g)(x) == f(g(x)); and_then(f, g)(x) == g(f(x))
    - Only the innermost function of a composition receives the call arguments;
      every other function receives exactly one value
    - arity() counts required positional parameters only
    - Wrong tuple length, variadic currying and required keyword-only parameters
      raise ArityError, never TypeError
    - partial_last output accepts its remaining parameters by position or keyword

Design Decisions:
    - Closures over bound arguments instead of wrapper classes; Fn is a thin
      method-bearing view over those closures, not a second implementation
    - Returned closures carry a __signature__ where one can be derived, so
      arity() works on combinator output as well as on plain functions
"""

import contextlib
import functools
import inspect
from typing import Any, Callable, Iterable, TypeVar

from fnfun.core.errors import ArityError, CompositionError

T = TypeVar("T")
R = TypeVar("R")

POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


# ─── Introspection ───────────────────────────────────────────────

def name_of(func: Callable) -> str:
    return getattr(func, "__name__", None) or type(func).__name__


def signature_of(func: Callable) -> inspect.Signature:
    try:
        return inspect.signature(func)
    except (TypeError, ValueError) as exc:
        raise ArityError(
            f"Cannot inspect the parameters of {name_of(func)}: {exc}",
            function_name=name_of(func),
        ) from exc


def _positional_parameters(func: Callable) -> list[inspect.Parameter]:
    return [
        p for p in signature_of(func).parameters.values()
        if p.kind in POSITIONAL_KINDS
    ]


def _positional_signature(count: int) -> inspect.Signature:
    """Signature of `count` positional-only parameters: (arg0, arg1, ..., /)."""
    return inspect.Signature([
        inspect.Parameter(f"arg{i}", inspect.Parameter.POSITIONAL_ONLY)
        for i in range(count)
    ])


def arity(func: Callable) -> int:
    """Number of required positional parameters of `func`."""
    return sum(
        1 for p in _positional_parameters(func) if p.default is p.empty
    )


def is_variadic(func: Callable) -> bool:
    return any(
        p.kind is inspect.Parameter.VAR_POSITIONAL
        for p in signature_of(func).parameters.values()
    )


def required_keywords(func: Callable) -> list[str]:
    """Names of keyword-only parameters without a default."""
    return [
        p.name for p in signature_of(func).parameters.values()
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is p.empty
    ]


def _require_positional_only_inputs(func: Callable, action: str) -> None:
    name = name_of(func)
    missing = required_keywords(func)
    if missing:
        raise ArityError(
            f"Cannot {action} {name}: required keyword-only parameter(s) "
            f"{', '.join(missing)}",
            function_name=name,
        )


# ─── Tupling ─────────────────────────────────────────────────────

def tupled(func: Callable[..., R]) -> Callable[[tuple], R]:
    """Turn an n-argument function into one accepting a single n-tuple."""
    _require_positional_only_inputs(func, "tuple")
    n = arity(func)
    name = name_of(func)

    def apply_tuple(args: tuple) -> R:
        if not isinstance(args, (tuple, list)):
            raise ArityError(
                f"tupled {name} expects a tuple of {n} element(s), "
                f"got {type(args).__name__}",
                function_name=name, arity=n,
            )
        if len(args) != n:
            raise ArityError(
                f"tupled {name} expects a tuple of {n} element(s), "
                f"got {len(args)}",
                function_name=name, arity=n,
            )
        return func(*args)

    apply_tuple.__name__ = f"tupled_{name}"
    return apply_tuple


def untupled(func: Callable[[tuple], R], n: int) -> Callable[..., R]:
    """Inverse of tupled: pack n positional arguments into one tuple."""
    name = name_of(func)

    def apply_args(*args: Any) -> R:
        if len(args) != n:
            raise ArityError(
                f"untupled {name} expects {n} argument(s), got {len(args)}",
                function_name=name, arity=n,
            )
        return func(tuple(args))

    apply_args.__name__ = f"untupled_{name}"
    apply_args.__signature__ = _positional_signature(n)
    return apply_args


# ─── Currying ────────────────────────────────────────────────────

def curried(func: Callable[..., R]) -> Callable:
    """Chain of one-argument functions, one per required positional parameter.

    Functions of arity 0 or 1 are already curried and come back unchanged.
    Every intermediate function is independent: binding the first argument
    once and applying the result many times never shares state.
    """
    name = name_of(func)
    if is_variadic(func):
        raise ArityError(
            f"Cannot curry variadic function {name}",
            function_name=name,
        )
    _require_positional_only_inputs(func, "curry")
    n = arity(func)
    if n <= 1:
        return func

    def collect(bound: tuple) -> Callable:
        def step(arg: Any):
            args = (*bound, arg)
            if len(args) == n:
                return func(*args)
            return collect(args)
        step.__name__ = f"curried_{name}_{len(bound) + 1}_of_{n}"
        return step

    return collect(())


def uncurried(func: Callable, n: int) -> Callable:
    """Inverse of curried: apply n arguments one call at a time."""
    name = name_of(func)

    def apply_all(*args: Any):
        if len(args) != n:
            raise ArityError(
                f"uncurried {name} expects {n} argument(s), got {len(args)}",
                function_name=name, arity=n,
            )
        if n == 0:
            return func()
        result = func
        for arg in args:
            result = result(arg)
        return result

    apply_all.__name__ = f"uncurried_{name}"
    apply_all.__signature__ = _positional_signature(n)
    return apply_all


# ─── Partial application ─────────────────────────────────────────

def partial_first(func: Callable[..., R], *bound: Any) -> Callable[..., R]:
    """Bind leading positional arguments: partial_first(f, a)(b) == f(a, b)."""
    positional = _positional_parameters(func)
    if len(bound) > len(positional) and not is_variadic(func):
        raise ArityError(
            f"{name_of(func)} takes {len(positional)} positional argument(s), "
            f"cannot bind {len(bound)}",
            function_name=name_of(func), arity=len(positional),
        )
    return functools.partial(func, *bound)


def partial_last(func: Callable[..., R], *bound: Any) -> Callable[..., R]:
    """Bind trailing positional arguments: partial_last(f, b)(a) == f(a, b)."""
    name = name_of(func)
    positional = _positional_parameters(func)
    if len(bound) > len(positional):
        raise ArityError(
            f"{name} takes {len(positional)} positional argument(s), "
            f"cannot bind {len(bound)}",
            function_name=name, arity=len(positional),
        )
    if bound and is_variadic(func):
        raise ArityError(
            f"Cannot bind trailing arguments of variadic function {name}",
            function_name=name,
        )
    dropped = {p.name for p in positional[len(positional) - len(bound):]}
    signature = signature_of(func)
    remaining = signature.replace(parameters=[
        p for p in signature.parameters.values() if p.name not in dropped
    ])

    def bound_last(*args: Any, **kwargs: Any) -> R:
        try:
            call = remaining.bind(*args, **kwargs)
        except TypeError as exc:
            raise ArityError(
                f"{name} with trailing arguments bound rejected call: {exc}",
                function_name=name, arity=arity(bound_last),
            ) from exc
        call.apply_defaults()
        return func(*call.args, *bound, **call.kwargs)

    bound_last.__name__ = f"{name}_bound_last"
    bound_last.__signature__ = remaining
    return bound_last


# ─── Composition ─────────────────────────────────────────────────

def compose(*funcs: Callable) -> Callable:
    """compose(f, g)(x) == f(g(x)). The function listed first is applied last."""
    if len(funcs) < 2:
        raise CompositionError(len(funcs))
    *outer, innermost = funcs

    def composed(*args: Any, **kwargs: Any):
        result = innermost(*args, **kwargs)
        for fn in reversed(outer):
            result = fn(result)
        return result

    composed.__name__ = "_of_".join(name_of(fn) for fn in funcs)
    with contextlib.suppress(TypeError, ValueError):
        composed.__signature__ = inspect.signature(innermost)
    return composed


def and_then(*funcs: Callable) -> Callable:
    """and_then(f, g)(x) == g(f(x)). Functions apply in the order written."""
    if len(funcs) < 2:
        raise CompositionError(len(funcs))
    return compose(*reversed(funcs))


def fused_map(items: Iterable[T], *funcs: Callable) -> list:
    """Map the left-to-right composition of funcs over items in one pass."""
    if not funcs:
        return list(items)
    step = funcs[0] if len(funcs) == 1 else and_then(*funcs)
    return [step(item) for item in items]


# ─── Function values ─────────────────────────────────────────────

class Fn:
    """A function as a value with methods.

    Fn(f)(x) and Fn(f).apply(x) are the same call. The combinator methods
    return new Fn values and leave the wrapped function untouched.
    """

    def __init__(self, func: Callable):
        if isinstance(func, Fn):
            func = func.func
        if not callable(func):
            raise TypeError(f"Fn requires a callable, got {type(func).__name__}")
        self.func = func
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any):
        return self.func(*args, **kwargs)

    def apply(self, *args: Any, **kwargs: Any):
        return self.func(*args, **kwargs)

    @property
    def name(self) -> str:
        return name_of(self.func)

    @property
    def arity(self) -> int:
        return arity(self.func)

    def tupled(self) -> "Fn":
        return Fn(tupled(self.func))

    def curried(self) -> "Fn":
        return Fn(curried(self.func))

    def partial(self, *args: Any, **kwargs: Any) -> "Fn":
        if kwargs:
            return Fn(functools.partial(self.func, *args, **kwargs))
        return Fn(partial_first(self.func, *args))

    def partial_last(self, *args: Any) -> "Fn":
        return Fn(partial_last(self.func, *args))

    def compose(self, other: Callable) -> "Fn":
        return Fn(compose(self.func, _unwrap(other)))

    def and_then(self, other: Callable) -> "Fn":
        return Fn(and_then(self.func, _unwrap(other)))

    def __repr__(self) -> str:
        return f"Fn({self.name})"


def _unwrap(func: Callable) -> Callable:
    return func.func if isinstance(func, Fn) else func
