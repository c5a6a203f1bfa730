"""Parameter checks and value coercion shared by the service classes."""
import os
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple, Union


class MissingParametersError(ValueError):
    """Raised when an operation is called without its required fields."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__("Missing required parameters: " + ", ".join(self.missing))


@dataclass
class FileObject:
    """Upload content together with an explicit filename and content type."""

    value: Any
    filename: Optional[str] = None
    content_type: Optional[str] = None


def _field(params: Any, name: str) -> Any:
    if params is None:
        return None
    if isinstance(params, Mapping):
        return params.get(name)
    return getattr(params, name, None)


def get_missing_params(params: Any, required: Iterable[str]) -> Optional[MissingParametersError]:
    """Return an error naming every required field that is absent or None."""
    missing = [name for name in required if _field(params, name) is None]
    if missing:
        return MissingParametersError(missing)
    return None


def build_file_part(
    value: Union[FileObject, bytes, str, Any],
    content_type: str,
    name: str,
) -> Tuple[str, Any, str]:
    """Turn an upload value into an httpx ``(filename, content, content_type)`` tuple."""
    filename = None
    if isinstance(value, FileObject):
        filename = value.filename
        content_type = value.content_type or content_type
        value = value.value
    if filename is None:
        path = getattr(value, "name", None)
        if isinstance(path, str) and path:
            filename = os.path.basename(path)
    return (filename or name, value, content_type)


def to_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(to_query_value(item) for item in value)
    return str(value)
