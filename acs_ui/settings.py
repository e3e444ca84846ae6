"""Environment-driven UI settings."""

from __future__ import annotations

import os
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict

from acs_common.config.env import parse_bool_env, parse_choice_env
from acs_ui.models import Brightness, SheetOptions

ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]
_COLOR_SYSTEMS = frozenset({"auto", "standard", "256", "truecolor", "windows"})


class UISettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    brightness: Brightness = Brightness.DARK
    headless: bool = False
    color_system: ColorSystem = "auto"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "UISettings":
        """Read ``ACS_THEME``, ``ACS_HEADLESS`` and ``ACS_COLOR_SYSTEM``."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        theme = parse_choice_env(
            env.get("ACS_THEME"), frozenset(b.value for b in Brightness)
        )
        if theme is not None:
            values["brightness"] = Brightness(theme)
        headless = parse_bool_env(env.get("ACS_HEADLESS"))
        if headless is not None:
            values["headless"] = headless
        color_system = parse_choice_env(env.get("ACS_COLOR_SYSTEM"), _COLOR_SYSTEMS)
        if color_system is not None:
            values["color_system"] = color_system
        return cls(**values)

    def effective_brightness(self, options: SheetOptions) -> Brightness:
        return options.brightness or self.brightness
