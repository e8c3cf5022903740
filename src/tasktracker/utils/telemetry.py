"""OpenTelemetry tracing helpers.

`trace_function` wraps a single sync or async callable in a span and
`trace_class` applies it to the public methods of a class:

```python
@trace_class(kind=SpanKind.SERVER)
class TaskManager:
    def get_task(self, task_id): ...
```

Spans are created through the globally configured tracer provider, so
nothing is exported unless the application installs an OpenTelemetry SDK.
"""

import functools
import inspect
import logging

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Span, StatusCode
from opentelemetry.trace import SpanKind as _SpanKind


SpanKind = _SpanKind
__all__ = ['SpanKind', 'trace_class', 'trace_function']
INSTRUMENTING_MODULE_NAME = 'tasktracker'
INSTRUMENTING_MODULE_VERSION = '0.1.0'

logger = logging.getLogger(__name__)

AttributeExtractor = Callable[
    [Span, tuple, dict, Any, BaseException | None], None
]


@contextmanager
def _span(
    name: str, kind: SpanKind, attributes: dict[str, Any] | None
) -> Iterator[Span]:
    tracer = trace.get_tracer(
        INSTRUMENTING_MODULE_NAME, INSTRUMENTING_MODULE_VERSION
    )
    with tracer.start_as_current_span(name, kind=kind) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)
        yield span


def _finish(
    span: Span,
    name: str,
    extractor: AttributeExtractor | None,
    args: tuple,
    kwargs: dict,
    result: Any,
    exception: BaseException | None,
) -> None:
    if exception is None:
        span.set_status(StatusCode.OK)
    else:
        span.record_exception(exception)
        span.set_status(StatusCode.ERROR, description=str(exception))
    if extractor is None:
        return
    try:
        extractor(span, args, kwargs, result, exception)
    except Exception:
        logger.exception('attribute_extractor failed in span %s', name)


def trace_function(
    func: Callable | None = None,
    *,
    span_name: str | None = None,
    kind: SpanKind = SpanKind.INTERNAL,
    attributes: dict[str, Any] | None = None,
    attribute_extractor: AttributeExtractor | None = None,
) -> Callable:
    """Traces every call of the decorated function in its own span.

    Usable bare (`@trace_function`) or with arguments
    (`@trace_function(span_name='tasks.create')`). Exceptions are recorded
    on the span and re-raised.

    Args:
        func: The function to wrap. None when used as a decorator factory.
        span_name: Span name; defaults to `module.qualname` of the function.
        kind: The OpenTelemetry span kind.
        attributes: Static attributes set on every span.
        attribute_extractor: Called as `(span, args, kwargs, result,
            exception)` after the call to add dynamic attributes. Its own
            errors are logged, never raised.

    Returns:
        The wrapped function, or a decorator when `func` is None.
    """
    if func is None:
        return functools.partial(
            trace_function,
            span_name=span_name,
            kind=kind,
            attributes=attributes,
            attribute_extractor=attribute_extractor,
        )

    name = span_name or f'{func.__module__}.{func.__qualname__}'

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _span(name, kind, attributes) as span:
                result = None
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _finish(
                        span, name, attribute_extractor, args, kwargs, None, e
                    )
                    raise
                _finish(
                    span, name, attribute_extractor, args, kwargs, result, None
                )
                return result

        return async_wrapper

    @functools.wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        with _span(name, kind, attributes) as span:
            result = None
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _finish(span, name, attribute_extractor, args, kwargs, None, e)
                raise
            _finish(span, name, attribute_extractor, args, kwargs, result, None)
            return result

    return sync_wrapper


def trace_class(
    include_list: list[str] | None = None,
    exclude_list: list[str] | None = None,
    kind: SpanKind = SpanKind.INTERNAL,
) -> Callable[[type], type]:
    """Applies `trace_function` to the methods of a class.

    Dunder and underscore-prefixed methods are skipped. When `include_list`
    is given only those methods are traced; otherwise every public method
    not in `exclude_list` is.
    """
    exclude = set(exclude_list or [])

    def decorator(cls: type) -> type:
        for name, method in inspect.getmembers(cls, inspect.isfunction):
            if name.startswith('_'):
                continue
            if include_list is not None:
                if name not in include_list:
                    continue
            elif name in exclude:
                continue
            setattr(
                cls,
                name,
                trace_function(
                    span_name=f'{cls.__module__}.{cls.__name__}.{name}',
                    kind=kind,
                )(method),
            )
        return cls

    return decorator
