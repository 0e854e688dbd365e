"""Lookup of render sinks by the names used in ``[tool.utest] reporters``.

Sinks register themselves with ``@reporter``, under their class name plus any
aliases. A name that is not registered but contains a dot or colon is imported as
``"package.module:Class"``. Options that apply to every sink, such as the configured
verbosity, are passed only to sinks whose constructor accepts them.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from utest.errors import ConfigError

if TYPE_CHECKING:
    from utest.reports.base import Reporter

logger = logging.getLogger(__name__)

T = TypeVar("T")

_reporter_registry: dict[str, type[Reporter]] = {}


def reporter(
    cls: type[T] | None = None,
    *,
    name: str | None = None,
    aliases: Iterable[str] = (),
) -> type[T] | Any:
    """Make a sink class addressable from configuration.

        @reporter
        class JsonReporter: ...

        @reporter(aliases=("json",))
        class JsonReporter: ...

    Args:
        cls: The class to register.
        name: Primary lookup name, defaulting to the class name.
        aliases: Further names resolving to the same class.
    """

    def decorator(cls: type[T]) -> type[T]:
        for key in (name or cls.__name__, *aliases):
            previous = _reporter_registry.get(key)
            if previous is not None and previous is not cls:
                logger.debug("Reporter name %r now refers to %s instead of %s", key, cls, previous)
            _reporter_registry[key] = cls  # type: ignore[assignment]
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator


def registered_reporters() -> Mapping[str, type[Reporter]]:
    """Read-only view of every registered name and the class it resolves to."""
    return MappingProxyType(_reporter_registry)


def _import_reporter_class(import_path: str) -> type[Reporter]:
    if ":" in import_path:
        module_path, class_name = import_path.rsplit(":", 1)
    else:
        module_path, class_name = import_path.rsplit(".", 1)

    module = importlib.import_module(module_path)
    try:
        cls = getattr(module, class_name)
    except AttributeError:
        msg = f"Module {module_path!r} has no reporter {class_name!r}"
        raise ConfigError(msg) from None

    from utest.reports.base import Reporter

    if not isinstance(cls, type) or not issubclass(cls, Reporter):
        msg = f"{import_path} does not implement the Reporter hooks"
        raise TypeError(msg)
    return cls


def reporter_class(name: str) -> type[Reporter]:
    """Return the sink class ``name`` refers to, by registry name or import path.

    Raises:
        ConfigError: If ``name`` is neither registered nor importable.
    """
    if name in _reporter_registry:
        return _reporter_registry[name]
    if ":" in name or "." in name:
        return _import_reporter_class(name)
    available = ", ".join(sorted(_reporter_registry)) or "none"
    msg = f"Unknown reporter: {name}. Available: {available}"
    raise ConfigError(msg)


def _accepted(cls: type, options: Mapping[str, Any]) -> dict[str, Any]:
    try:
        parameters = inspect.signature(cls).parameters
    except (TypeError, ValueError):
        return {}
    named = {
        key
        for key, parameter in parameters.items()
        if parameter.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    }
    return {key: value for key, value in options.items() if key in named}


def resolve_reporter(name: str, **options: Any) -> Reporter:
    """Instantiate the sink ``name`` refers to with ``options`` as keyword arguments."""
    cls = reporter_class(name)
    logger.debug("Resolved reporter %r to %s", name, cls.__qualname__)
    return cls(**options)


def resolve_reporters(
    names: Iterable[str],
    options: Mapping[str, Mapping[str, Any]] | None = None,
    *,
    defaults: Mapping[str, Any] | None = None,
) -> list[Reporter]:
    """Instantiate several sinks.

    Args:
        names: Registry names or import paths, in order.
        options: Keyword arguments per name; these always reach the sink.
        defaults: Keyword arguments for every sink, passed only where the sink's
            constructor accepts them and ``options`` does not already set them.
    """
    options = options or {}
    sinks = []
    for name in names:
        kwargs = _accepted(reporter_class(name), defaults or {})
        kwargs.update(options.get(name, {}))
        sinks.append(resolve_reporter(name, **kwargs))
    return sinks


__all__ = [
    "registered_reporters",
    "reporter",
    "reporter_class",
    "resolve_reporter",
    "resolve_reporters",
]
