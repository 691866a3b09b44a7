"""Options accepted by the stat entry points."""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fsstat.core.errors import InvalidArgumentTypeError, NotImplementedFeatureError

BIGINT_FEATURE = "stat with options `{ bigint: true }` is not supported"


class StatOptions(BaseModel):
    """Options for stat and lstat.

    Unknown keys are accepted and ignored.

    Attributes:
        bigint: Request arbitrary-precision integer fields. Not supported;
            only False is accepted.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    bigint: Annotated[
        bool,
        Field(description="Return arbitrary-precision integer fields (unsupported)"),
    ] = False


def coerce_options(value: StatOptions | Mapping[str, Any] | None) -> StatOptions:
    """Normalize an options argument to a StatOptions instance.

    Raises:
        InvalidArgumentTypeError: If the value is not None, a mapping, or StatOptions,
            or if a mapping carries a non-boolean ``bigint``.
    """
    if value is None:
        return StatOptions()
    if isinstance(value, StatOptions):
        return value
    if isinstance(value, Mapping):
        try:
            return StatOptions.model_validate(dict(value))
        except ValidationError as e:
            raise InvalidArgumentTypeError(
                "options.bigint", "of type boolean", value.get("bigint")
            ) from e
    raise InvalidArgumentTypeError("options", "an object", value)


def check_options(options: StatOptions) -> None:
    """Reject options this implementation does not support.

    Raises:
        NotImplementedFeatureError: If ``bigint`` is requested.
    """
    if options.bigint:
        raise NotImplementedFeatureError(BIGINT_FEATURE)
