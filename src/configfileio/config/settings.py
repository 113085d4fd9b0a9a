"""Library options and their loading from the environment."""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from configfileio.core.exceptions import ConfigurationError, InvalidDelimiterError

logger = logging.getLogger(__name__)

ENV_PREFIX = "CONFIGFILEIO_"
DEFAULT_DELIMITER = "="
LINE_TERMINATOR = "\r\n"
COMMENT_PREFIX = "//"


def check_delimiter(delimiter: str) -> str:
    """Return the delimiter if usable, raise InvalidDelimiterError otherwise."""
    if not isinstance(delimiter, str) or len(delimiter) != 1 or delimiter in "\r\n":
        raise InvalidDelimiterError(delimiter)
    return delimiter


class FileOptions(BaseModel):
    """How configuration files are read and written."""

    delimiter: str = DEFAULT_DELIMITER
    encoding: str = "utf-8"
    create_if_missing: bool = True

    @field_validator("delimiter")
    @classmethod
    def _validate_delimiter(cls, value: str) -> str:
        return check_delimiter(value)


def load_options(environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> FileOptions:
    """Build options from ``CONFIGFILEIO_*`` environment variables.

    Keyword overrides that are not None take precedence over the environment.
    """
    environ = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    for field in FileOptions.model_fields:
        key = f"{ENV_PREFIX}{field.upper()}"
        if key in environ:
            data[field] = environ[key]
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        options = FileOptions(**data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configfileio options: {exc}") from exc

    logger.debug("Loaded options: %s", options.model_dump())
    return options


__all__ = [
    "FileOptions",
    "load_options",
    "check_delimiter",
    "DEFAULT_DELIMITER",
    "LINE_TERMINATOR",
    "COMMENT_PREFIX",
]
