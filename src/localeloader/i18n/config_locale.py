"""
LocaleLoader Localized Config

Plugin settings whose name and description are locale keys.

The resulting keys are:
    Name        = Settings.{guid}.{section}.{key}
    Description = Settings.{guid}.{section}.{key}.Description

Plugins ship the texts for these keys in their Locale/ folder.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from localeloader.services.settings_manager import SettingsManager
from localeloader.utils.constants import SETTINGS_DESCRIPTION_SUFFIX, SETTINGS_KEY_PREFIX

T = TypeVar("T")


def settings_locale_key(guid: str, section: str, key: str) -> str:
    """Locale key of a setting's display name."""
    return f"{SETTINGS_KEY_PREFIX}.{guid}.{section}.{key}"


@dataclass(frozen=True)
class ConfigLocale:
    """Locale keys of a setting's name and description."""
    name: str
    description: str

    @classmethod
    def for_setting(cls, guid: str, section: str, key: str) -> "ConfigLocale":
        name = settings_locale_key(guid, section, key)
        return cls(name, f"{name}.{SETTINGS_DESCRIPTION_SUFFIX}")


@dataclass(frozen=True)
class ConfigDefinition:
    """Section and key of a setting."""
    section: str
    key: str

    @property
    def path(self) -> str:
        return f"{self.section}.{self.key}"


@dataclass
class ConfigDescription:
    """Plain description plus tags (a ConfigLocale among them)."""
    description: str = ""
    acceptable_values: Optional[Tuple[Any, ...]] = None
    tags: List[Any] = field(default_factory=list)

    @property
    def locale(self) -> Optional[ConfigLocale]:
        return next((tag for tag in self.tags if isinstance(tag, ConfigLocale)), None)


class ConfigEntry(Generic[T]):
    """A plugin setting stored in the SettingsManager."""

    def __init__(
        self,
        settings: SettingsManager,
        guid: str,
        definition: ConfigDefinition,
        default_value: T,
        description: ConfigDescription
    ):
        self._settings = settings
        self.guid = guid
        self.definition = definition
        self.default_value = default_value
        self.description = description

        stored = settings.get_plugin_settings(guid)
        if definition.path not in stored:
            settings.set_plugin_setting(guid, definition.path, default_value)

    @property
    def locale(self) -> Optional[ConfigLocale]:
        return self.description.locale

    @property
    def value(self) -> T:
        return self._settings.get_plugin_settings(self.guid).get(
            self.definition.path, self.default_value
        )

    @value.setter
    def value(self, new_value: T) -> None:
        acceptable = self.description.acceptable_values
        if acceptable is not None and new_value not in acceptable:
            raise ValueError(
                f"{new_value!r} is not an acceptable value for {self.definition.path}"
            )
        self._settings.set_plugin_setting(self.guid, self.definition.path, new_value)

    def __repr__(self) -> str:
        return f"<ConfigEntry {self.guid}:{self.definition.path}={self.value!r}>"


def bind_localized(
    settings: SettingsManager,
    guid: str,
    section: str,
    key: str,
    default_value: T,
    description: Optional[ConfigDescription] = None
) -> ConfigEntry[T]:
    """
    Create a setting with localized name and description.

    Args:
        settings: Settings the value is stored in
        guid: Plugin identifier, keeps keys unique across plugins
        section: Section/group of the setting
        key: Name of the setting
        default_value: Value used until the setting is changed
        description: Plain description and tags (optional)

    Returns:
        ConfigEntry tagged with its ConfigLocale

    Example:
        volume = bind_localized(settings, "com.example.mod", "Audio", "Volume", 80)
        volume.locale.name  # "Settings.com.example.mod.Audio.Volume"
    """
    locale = ConfigLocale.for_setting(guid, section, key)

    tags = [*description.tags, locale] if description else [locale]
    final_description = ConfigDescription(
        description=description.description if description else "",
        acceptable_values=description.acceptable_values if description else None,
        tags=tags,
    )

    return ConfigEntry(
        settings, guid, ConfigDefinition(section, key), default_value, final_description
    )
