"""Request validation — loose payload in, tagged ``ScanConfig`` out.

The wire format is the camelCase object accepted by the CLI's
``--files-json`` option, the web API and :func:`convert_styling.api.convert_styling`::

    {
      "projectRoot": "/abs/path",          # ignored when files is non-empty
      "files": [{"path": "...", "content": "..."}],
      "basePath": "my-repo",               # display label for in-memory runs
      "apply": false,
      "maxFiles": 5000,
      "includeExtensions": [".ts", "css"],
      "excludeDirNames": ["node_modules"],
      "mode": "uniwind-migration"
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)

from convert_styling.core.config import (
    DiskRequest,
    ScanConfig,
    VirtualFile,
    VirtualRequest,
)
from convert_styling.errors import InputValidationError
from convert_styling.model import MigrationMode
from convert_styling.rules import (
    DEFAULT_EXCLUDE_DIR_NAMES,
    DEFAULT_INCLUDE_EXTENSIONS,
    DEFAULT_MAX_FILES,
    MAX_FILES_CEILING,
    MAX_VIRTUAL_PATH_LENGTH,
)

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


class VirtualFileInput(BaseModel):
    """One in-memory file."""

    path: Annotated[StrictStr, Field(min_length=1, max_length=MAX_VIRTUAL_PATH_LENGTH)]
    content: StrictStr


class ConvertStylingInput(BaseModel):
    """Request to scan (and optionally migrate) a project."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    project_root: Optional[NonEmptyStr] = Field(default=None, alias="projectRoot")
    files: Optional[list[VirtualFileInput]] = Field(default=None)
    base_path: Optional[NonEmptyStr] = Field(default=None, alias="basePath")
    apply: Optional[StrictBool] = Field(default=None)
    max_files: Optional[StrictInt] = Field(
        default=None, alias="maxFiles", ge=1, le=MAX_FILES_CEILING
    )
    include_extensions: Optional[list[NonEmptyStr]] = Field(
        default=None, alias="includeExtensions"
    )
    exclude_dir_names: Optional[list[NonEmptyStr]] = Field(
        default=None, alias="excludeDirNames"
    )
    mode: Optional[MigrationMode] = Field(default=None)


def _format_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "(root)"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def _normalize_ext(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"


def parse_request(
    payload: Any,
    *,
    project_root_fallback: str | Path | None = None,
) -> ScanConfig:
    """Validate *payload* and build the tagged configuration.

    A non-empty ``files`` list always selects :class:`VirtualRequest`;
    otherwise ``projectRoot`` (or *project_root_fallback*, or the current
    directory) selects :class:`DiskRequest`.

    Raises
    ------
    InputValidationError
        If *payload* is not a mapping or violates a constraint.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InputValidationError(
            f"Invalid input: expected an object, got {type(payload).__name__}"
        )
    try:
        data = ConvertStylingInput.model_validate(payload)
    except ValidationError as exc:
        raise InputValidationError(f"Invalid input: {_format_errors(exc)}") from exc

    if data.files:
        request: DiskRequest | VirtualRequest = VirtualRequest(
            files=tuple(VirtualFile(path=f.path, content=f.content) for f in data.files),
            base_path=(data.base_path or "(chat)").strip(),
        )
    else:
        fallback = project_root_fallback if project_root_fallback is not None else Path.cwd()
        request = DiskRequest(root=data.project_root or str(fallback))

    include = (
        frozenset(_normalize_ext(e) for e in data.include_extensions)
        if data.include_extensions is not None
        else DEFAULT_INCLUDE_EXTENSIONS
    )
    exclude = (
        frozenset(data.exclude_dir_names)
        if data.exclude_dir_names is not None
        else DEFAULT_EXCLUDE_DIR_NAMES
    )

    return ScanConfig(
        request=request,
        apply=bool(data.apply),
        max_files=data.max_files if data.max_files is not None else DEFAULT_MAX_FILES,
        include_extensions=include,
        exclude_dir_names=exclude,
        mode=data.mode or MigrationMode.UNIWIND_MIGRATION,
    )
