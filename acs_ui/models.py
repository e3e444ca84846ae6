"""Sheet presentation options handed to modal hosts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, InstanceOf, ValidationError

from acs_common.errors import ConfigurationError


class Brightness(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class Alignment(str, Enum):
    """Horizontal placement of the cells inside one row."""

    START = "start"
    CENTER = "center"
    END = "end"
    SPACE_BETWEEN = "space_between"
    SPACE_AROUND = "space_around"
    SPACE_EVENLY = "space_evenly"


@dataclass(frozen=True)
class EdgeInsets:
    """Padding in terminal cells (lines for top/bottom, columns for sides)."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        if min(self.top, self.right, self.bottom, self.left) < 0:
            raise ValueError("EdgeInsets values cannot be negative")

    @classmethod
    def all(cls, value: int) -> "EdgeInsets":
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, vertical: int = 0, horizontal: int = 0) -> "EdgeInsets":
        return cls(vertical, horizontal, vertical, horizontal)

    @classmethod
    def coerce(cls, value: Any) -> "EdgeInsets":
        """Accept an EdgeInsets, an int, or a 1/2/4-sequence in CSS order."""
        if isinstance(value, EdgeInsets):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.all(value)
        if isinstance(value, Sequence) and not isinstance(value, str):
            values = tuple(int(v) for v in value)
            if len(values) == 1:
                return cls.all(values[0])
            if len(values) == 2:
                return cls.symmetric(values[0], values[1])
            if len(values) == 4:
                return cls(*values)
        raise ValueError(f"Cannot build EdgeInsets from {value!r}")

    def as_rich(self) -> Tuple[int, int, int, int]:
        return (self.top, self.right, self.bottom, self.left)

    @property
    def horizontal(self) -> int:
        return self.left + self.right


Insets = Annotated[InstanceOf[EdgeInsets], BeforeValidator(EdgeInsets.coerce)]
BorderBox = Literal["rounded", "square", "heavy", "double", "ascii"]


class SheetOptions(BaseModel):
    """
    Cosmetic and behavioural options handed to the modal host as-is.

    Sizes are terminal cells. ``host_options`` carries toolkit-specific
    extras (elevation, shape, animation controller, route metadata, ...)
    that the bundled hosts record but do not interpret.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: Optional[str] = None
    title_padding: Insets = EdgeInsets(bottom=1)
    caption_padding: Insets = EdgeInsets()
    sheet_padding: Insets = EdgeInsets(1, 2, 1, 2)
    item_padding: Insets = EdgeInsets(0, 1, 0, 1)
    item_width: int = Field(default=3, ge=1)
    border_box: BorderBox = "rounded"
    border_color: Optional[str] = None
    row_gap: int = Field(default=1, ge=0)
    alignment: Alignment = Alignment.SPACE_AROUND
    background_color: Optional[str] = None
    barrier_color: Optional[str] = None
    brightness: Optional[Brightness] = None
    is_scroll_controlled: bool = False
    is_dismissible: bool = True
    enable_drag: bool = True
    close_on_action: bool = True
    host_options: dict[str, Any] = Field(default_factory=dict)


def resolve_sheet_options(
    options: SheetOptions | Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SheetOptions:
    """Validate ``options`` and merge ``overrides`` into a new SheetOptions."""
    try:
        if options is None:
            base = SheetOptions()
        elif isinstance(options, SheetOptions):
            base = options
        else:
            base = SheetOptions.model_validate(dict(options))
        if overrides:
            base = SheetOptions.model_validate({**dict(base), **overrides})
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid sheet options.",
            setting="options",
            context={
                "errors": [
                    f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                    for err in exc.errors()
                ]
            },
            cause=exc,
        ) from exc
    return base
