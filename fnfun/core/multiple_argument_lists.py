"""Multiple Argument Lists — f(a)(b) calls, type-class writers, functional dependency injection.

Invariants:
    - two_lists(k)(f) accepts exactly the first k parameters in the first call
      and the remaining parameters in the second call; defaults only apply
      in the second call
    - lookup_enterprise(host, port) captures its configuration once; the returned
      lookup only ever needs an ERN
    - A blank ERN never produces an Enterprise
"""

import dataclasses
import inspect
import json
from dataclasses import dataclass
from typing import Any, Callable, Protocol, TypeVar

from fnfun.core.errors import ArityError
from fnfun.core.examples import base_http_url
from fnfun.core.functions import POSITIONAL_KINDS, name_of, signature_of

A = TypeVar("A", contravariant=True)


# ─── Two argument lists ──────────────────────────────────────────

def two_lists(first_arity: int) -> Callable[[Callable], Callable]:
    """Split a function's parameters into two argument lists.

    two_lists(2)(f)(s, i)(c, b) == f(s, i, c, b). The first list is always
    positional-capable; keyword arguments are accepted in both lists.
    """
    def decorate(func: Callable) -> Callable:
        name = name_of(func)
        params = list(signature_of(func).parameters.values())
        leading = params[:first_arity]
        if len(leading) != first_arity or any(
            p.kind not in POSITIONAL_KINDS for p in leading
        ):
            raise ArityError(
                f"{name} has no {first_arity} leading positional parameter(s)",
                function_name=name, arity=first_arity,
            )
        first_sig = inspect.Signature([
            p.replace(default=inspect.Parameter.empty) for p in leading
        ])
        rest_sig = inspect.Signature(params[first_arity:])

        def first_list(*args: Any, **kwargs: Any) -> Callable:
            first = _bind(name, first_sig, args, kwargs)

            def second_list(*args2: Any, **kwargs2: Any):
                rest = _bind(name, rest_sig, args2, kwargs2)
                return func(*first.args, *rest.args, **rest.kwargs)

            second_list.__name__ = f"{name}_second_list"
            second_list.__signature__ = rest_sig
            return second_list

        first_list.__name__ = name
        first_list.__doc__ = func.__doc__
        first_list.__signature__ = first_sig
        return first_list

    return decorate


def _bind(
    name: str, signature: inspect.Signature, args: tuple, kwargs: dict,
) -> inspect.BoundArguments:
    try:
        bound = signature.bind(*args, **kwargs)
    except TypeError as exc:
        raise ArityError(
            f"{name}: argument list {signature} rejected call: {exc}",
            function_name=name, arity=len(signature.parameters),
        ) from exc
    bound.apply_defaults()
    return bound


# ─── Type-class style writers ────────────────────────────────────

class Writer(Protocol[A]):
    """Structural contract: anything with write(value) -> str."""
    def write(self, value: A) -> str: ...


class JsonWriter:
    """Writes dataclasses, dicts, lists and scalars as sorted-key JSON."""

    def write(self, value: Any) -> str:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = dataclasses.asdict(value)
        return json.dumps(value, sort_keys=True, ensure_ascii=False)


class ReprWriter:
    def write(self, value: Any) -> str:
        return repr(value)


def render_with(writer: Writer) -> Callable[[Any], str]:
    """Fix the writer first; the returned function only needs the value."""
    def render(value: Any) -> str:
        return writer.write(value)
    return render


# ─── Dependency injection ────────────────────────────────────────

@dataclass(frozen=True)
class Enterprise:
    ern: str
    source: str


def lookup_enterprise(host: str, port: int) -> Callable[[str], Enterprise | None]:
    """Inject configuration, returning a lookup client code can call with an ERN alone."""
    source = base_http_url(host, port)

    def configured_lookup(ern: str) -> Enterprise | None:
        ern = ern.strip()
        if not ern:
            return None
        return Enterprise(ern=ern, source=source)

    return configured_lookup
