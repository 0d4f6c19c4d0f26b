from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from catering.domain.errors import invalid_param, required_param
from catering.domain.result import Result, Return

CommandT = TypeVar("CommandT", bound=BaseModel)


def validate_command(command_cls: Type[CommandT], **fields) -> Result[CommandT]:
    """
    Build a command from raw request fields.

    Missing or empty fields fail with REQUIRED_PARAM; anything the command
    model rejects fails with INVALID_PARAM.
    """
    for name in command_cls.model_fields:
        value = fields.get(name)
        if value is None or value == "":
            return Return.err(required_param(f"missing field: {name}"))

    try:
        return Return.ok(command_cls(**fields))
    except ValidationError as exc:
        return Return.err(invalid_param(str(exc)))
