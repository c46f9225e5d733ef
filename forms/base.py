"""
Form state shared by the expense, meal and journal forms.

A form holds raw user input in ``values``, validates it against a Pydantic
schema, and only hands the typed payload to a submit handler once every field
passes. Field errors are kept in ``errors`` keyed by dotted path
(``items.0.amount``) and the outcome of the last submit in ``message``.
"""

import functools
import inspect
import logging
from typing import Any, Callable, Dict, Generic, Optional, Type, TypeVar

import anyio
from pydantic import BaseModel, ValidationError

from app.exceptions import StoreError
from app.messages import describe_errors, failure_message, status_message

logger = logging.getLogger("dailylog.forms")

SchemaType = TypeVar("SchemaType", bound=BaseModel)


async def call_handler(handler: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Await ``handler``; blocking handlers run in a worker thread."""
    if inspect.iscoroutinefunction(handler) or inspect.iscoroutinefunction(
        getattr(handler, "__call__", None)
    ):
        return await handler(*args, **kwargs)
    return await anyio.to_thread.run_sync(functools.partial(handler, *args, **kwargs))


class BaseForm(Generic[SchemaType]):
    """Validated form bound to one schema"""

    schema: Type[SchemaType]

    def __init__(self, locale: Optional[str] = None, **initial: Any):
        self.locale = locale
        self.values: Dict[str, Any] = self.default_values()
        self.values.update(initial)
        self.errors: Dict[str, str] = {}
        self.message: Optional[str] = None
        self.is_submitting = False

    def default_values(self) -> Dict[str, Any]:
        return {}

    def set(self, field: str, value: Any) -> None:
        """Change one field; its stale error is dropped until the next validate."""
        self.values[field] = value
        self._clear_errors(field)

    def validate(self) -> Dict[str, str]:
        """Run all rules; returns (and stores) the field errors, empty if valid."""
        try:
            self.schema.model_validate(self.values)
        except ValidationError as e:
            self.errors = describe_errors(e.errors(), self.locale)
        else:
            self.errors = {}
        return self.errors

    def cleaned(self) -> Optional[SchemaType]:
        """The typed payload, or None with ``errors`` filled in."""
        try:
            payload = self.schema.model_validate(self.values)
        except ValidationError as e:
            self.errors = describe_errors(e.errors(), self.locale)
            logger.debug(
                f"form_invalid form={self.__class__.__name__} fields={sorted(self.errors)}"
            )
            return None
        self.errors = {}
        return payload

    @property
    def is_valid(self) -> bool:
        return not self.validate()

    async def submit(self, handler: Callable[..., Any]) -> Any:
        """
        Validate and, if every field passes, call ``handler`` with the payload.

        The status message follows the handler's result: "Saved" or "Updated"
        from its ``action``, else its ``message`` attribute (if any). A
        ``StoreError`` is logged and the failure message for its operation
        shown instead; it is not retried. Both are in the form's ``locale``.

        Returns:
            The handler's result, or None when validation failed, a submit was
            already running, or the store failed.
        """
        if self.is_submitting:
            return None
        self.message = None

        payload = self.cleaned()
        if payload is None:
            return None

        self.is_submitting = True
        try:
            result = await call_handler(handler, *self.handler_args(payload))
        except StoreError as e:
            logger.error(
                f"form_submit_failed form={self.__class__.__name__} "
                f"operation={e.operation} error={e.cause or e}"
            )
            self.message = failure_message(e.operation, self.locale)
            return None
        finally:
            self.is_submitting = False

        action = getattr(result, "action", None)
        if action is not None:
            self.message = status_message(action, self.locale)
        else:
            self.message = getattr(result, "message", None)
        self.after_submit(payload, result)
        return result

    def handler_args(self, payload: SchemaType) -> tuple:
        return (payload,)

    def after_submit(self, payload: SchemaType, result: Any) -> None:
        pass

    def _clear_errors(self, prefix: str) -> None:
        for path in [p for p in self.errors if p == prefix or p.startswith(prefix + ".")]:
            del self.errors[path]
