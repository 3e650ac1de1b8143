"""Configuration schema for the lang router plugin using nested Pydantic models."""

import re
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LANGUAGE_CODE_RE = re.compile(r"[a-zA-Z]{2}")


class PluginOptions(BaseModel):
    """Feature switches, normally answered through the interactive prompts."""

    render_template: bool = Field(
        default=True,
        description="Render example translation files into src/lang",
    )
    rewrite_router_link: bool = Field(
        default=True,
        description="Rewrite <router-link> to <localized-link> in App.vue",
    )
    add_language_switcher: bool = Field(
        default=True,
        description="Insert a <language-switcher> example into App.vue",
    )


class LanguageConfig(BaseModel):
    """A single entry of the translations table."""

    name: str = Field(
        ...,
        description="Human readable language name shown by the switcher",
        min_length=1,
    )
    file: str = Field(
        ...,
        description="Translation file name, relative to src/lang/translations",
        pattern=r"^[\w.-]+\.json$",
    )


def _default_languages() -> dict[str, LanguageConfig]:
    return {
        "en": LanguageConfig(name="English", file="en.json"),
        "cs": LanguageConfig(name="Česky", file="cs.json"),
    }


class LocalizationConfig(BaseModel):
    """Localization configuration for the generated example files."""

    default_language: str = Field(
        default="en",
        description="Language code used when the URL carries no language prefix",
        pattern=r"^[a-zA-Z]{2}$",
    )
    languages: dict[str, LanguageConfig] = Field(
        default_factory=_default_languages,
        description="Available languages keyed by language code",
        min_length=1,
    )

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        """Validate and normalize language code."""
        return v.lower()

    @field_validator("languages")
    @classmethod
    def validate_language_codes(
        cls, v: dict[str, LanguageConfig]
    ) -> dict[str, LanguageConfig]:
        """Require two-letter language codes and lowercase them."""
        normalized: dict[str, LanguageConfig] = {}
        for code, language in v.items():
            if not LANGUAGE_CODE_RE.fullmatch(code):
                raise ValueError(f"Language code '{code}' must be two letters")
            if code.lower() in normalized:
                raise ValueError(f"Language code '{code}' is listed twice")
            normalized[code.lower()] = language
        return normalized

    @model_validator(mode="after")
    def validate_default_is_available(self) -> Self:
        """The default language must be one of the configured languages."""
        if self.default_language not in self.languages:
            raise ValueError(
                f"default_language '{self.default_language}' is not listed in languages"
            )
        return self


class DependencyConfig(BaseModel):
    """The dependency entry added to package.json."""

    name: str = Field(
        default="vue-lang-router",
        description="Package name of the routing localization library",
        min_length=1,
    )
    specifier: str = Field(
        default="^1.2.0",
        description="Version range or source specifier written to package.json",
        min_length=1,
    )


class PluginConfig(BaseModel):
    """
    Configuration model for the lang router plugin.

    Every section is optional so that an empty or missing configuration
    file yields the same behavior as the interactive defaults.
    """

    options: PluginOptions = Field(default_factory=PluginOptions)
    localization: LocalizationConfig = Field(default_factory=LocalizationConfig)
    dependency: DependencyConfig = Field(default_factory=DependencyConfig)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
        frozen=False,
    )
