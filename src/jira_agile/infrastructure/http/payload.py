"""
Payload serialization.

Turns a caller-supplied structure into a JSON byte stream for the request
body. ``None`` is rejected: an endpoint that takes a body has to be given one.
"""

import io
import json
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from jira_agile.exceptions import SerializationError, StructureNotProvidedError


def serialize_payload(structure: Any) -> io.BytesIO:
    """Encode ``structure`` as compact UTF-8 JSON.

    Pydantic models are dumped by alias with fields the caller never set
    dropped, which is what Jira expects for partial updates. A field set to
    None explicitly is sent as null. Dataclasses and plain JSON values are
    encoded as they are.

    Raises:
        StructureNotProvidedError: ``structure`` is None.
        SerializationError: ``structure`` has no JSON representation.
    """
    if structure is None:
        raise StructureNotProvidedError()

    try:
        if isinstance(structure, BaseModel):
            data = structure.model_dump(mode="json", by_alias=True, exclude_unset=True)
        else:
            data = to_jsonable_python(structure)
        body = json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(type(structure).__name__, str(e)) from e

    return io.BytesIO(body.encode("utf-8"))
