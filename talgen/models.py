"""Pydantic models for TAL build configuration."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .parser import MAX_DEPTH

DEFAULT_ROUTES: Dict[str, str] = {
    "nav_home": "home",
    "nav_docs": "docs",
    "nav_examples": "examples",
    "nav_res": "resources",
}


class PageConfig(BaseModel):
    """Settings for the page template wrapped around the parsed body."""

    title: str = Field("TAL Generated App", description="Document title.")
    lang: str = Field("en", description="Value of the html lang attribute.")
    routes: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_ROUTES),
        description="Map of action name to the section id it navigates to.",
    )
    sections: List[str] = Field(
        default_factory=list,
        description="Section ids hidden on navigation; defaults to the route targets.",
    )
    home_section: str = Field(
        "home",
        alias="homeSection",
        description="Section shown when the page loads.",
    )
    section_display: str = Field(
        "flex",
        alias="sectionDisplay",
        description="CSS display value applied to the visible section.",
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _default_sections(self) -> "PageConfig":
        if not self.sections:
            self.sections = list(dict.fromkeys(self.routes.values()))
        return self


class BuildConfig(BaseModel):
    """Schema for tal.yaml."""

    input: str = Field("code.tal", description="Path of the TAL source file.")
    output: str = Field("index.html", description="Path of the generated page.")
    strict: bool = Field(
        False, description="Fail on unterminated '{' or '[' instead of truncating."
    )
    max_depth: Optional[int] = Field(
        None,
        alias="maxDepth",
        ge=1,
        le=MAX_DEPTH,
        description="Override for the parser nesting limit.",
    )
    on_missing_root: Literal["diagnostic", "abort"] = Field(
        "diagnostic",
        alias="onMissingRoot",
        description="Render a diagnostic fragment or abort when no root marker exists.",
    )
    page: PageConfig = Field(default_factory=PageConfig, description="Page template settings.")

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["BuildConfig", "DEFAULT_ROUTES", "PageConfig"]
