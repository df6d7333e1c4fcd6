"""Configuration schema definitions using Pydantic for validation.

A single ``ReduceConfig`` drives discovery, include extraction, cycle
handling and reporting. Values come from a TOML/JSON file, command-line
flags, or both (flags win).
"""

import re
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from minclude.utils.path_utils import normalize_base


class ReduceConfig(BaseModel):
    """Configuration for one include reduction run.

    Attributes:
        base: Directory prepended to include targets to form identifiers.
        recursive: Treat inputs as directories and discover headers under them.
        extensions: Header suffixes used for discovery and include matching.
        include_pattern: Regex overriding the include directive pattern.
        tolerate_cycles: Report include cycles instead of failing.
        verbose: Print kept/removed includes per file.
        dry_run: Do not rewrite files (implies verbose).
        min_files: Minimum number of input files for a run.
        ignore_patterns: Glob patterns skipped during recursive discovery.
    """

    base: str = ""
    recursive: bool = False
    extensions: List[str] = Field(default_factory=lambda: [".h"])
    include_pattern: Optional[str] = None
    tolerate_cycles: bool = False
    verbose: bool = False
    dry_run: bool = False
    min_files: int = Field(default=2, ge=1)
    ignore_patterns: List[str] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @field_validator("base")
    @classmethod
    def validate_base(cls, v: str) -> str:
        """Normalize the base into a ``/``-terminated prefix."""
        return normalize_base(v)

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: List[str]) -> List[str]:
        """Validate that extensions are non-empty and dot-prefixed."""
        if not v:
            raise ValueError("extensions must contain at least one suffix")
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Invalid extension '{ext}': expected e.g. '.h'")
        return v

    @field_validator("include_pattern")
    @classmethod
    def validate_include_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Validate that a custom pattern compiles with one capturing group."""
        if v is None:
            return v
        try:
            compiled = re.compile(v)
        except re.error as exc:
            raise ValueError(f"Invalid include_pattern: {exc}") from exc
        if compiled.groups != 1:
            raise ValueError(
                "include_pattern must have exactly one capturing group "
                f"(the include target), got {compiled.groups}"
            )
        return v

    @model_validator(mode="after")
    def dry_run_implies_verbose(self) -> "ReduceConfig":
        if self.dry_run:
            self.verbose = True
        return self

    @property
    def strict(self) -> bool:
        """Whether include cycles abort the run."""
        return not self.tolerate_cycles
