"""
Configuration models for the tab stores.

Structured, type-safe configuration using Pydantic models. Instead of passing
loose options around, create a TabsConfig with grouped settings.

Example:
    >>> from tabs_config import TabsConfig, CacheConfig, TabStyles
    >>> from tab_management import TabsProvider
    >>> config = TabsConfig(
    ...     cache=CacheConfig(cache_limit=10),
    ...     styles=TabStyles(tab_bar="shadow-sm")
    ... )
    >>> provider = TabsProvider(config=config)
"""
from __future__ import annotations

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator


DEFAULT_CACHE_LIMIT = 5

DEFAULT_TAB_STYLES: Dict[str, str] = {
    "container": "w-full h-full flex flex-col bg-gray-50",
    "tab_bar": "flex-none flex bg-white border-b border-gray-200 overflow-x-auto",
    "tab": (
        "flex items-center min-w-[180px] max-w-[220px] px-4 py-3 border-r "
        "border-gray-200 cursor-move transition-all duration-200 relative"
    ),
    "tab_active": "bg-white text-gray-900 border-b-2 border-blue-500",
    "tab_inactive": "text-gray-600 hover:bg-gray-50 hover:text-gray-900",
    "tab_dragging": "opacity-50",
    "tab_idle": "opacity-100",
    "tab_content": "flex-1 flex items-center overflow-hidden group px-2 gap-2",
    "tab_label": "truncate flex-1 text-sm font-medium",
    "close_button": (
        "ml-auto p-1 rounded opacity-0 group-hover:opacity-100 transition-all "
        "duration-200 hover:bg-gray-200 hover:text-red-600 cursor-pointer "
        "relative z-20 flex items-center justify-center"
    ),
    "close_icon": "h-3.5 w-3.5 text-gray-400 hover:text-red-600 transition-colors",
    "content_area": "flex-1 bg-white overflow-hidden",
    "active_tab_content": "h-full overflow-auto",
    "drop_indicator": "absolute top-0 bottom-0 w-1 bg-blue-500 transition-all duration-200",
}


class TabStyles(BaseModel):
    """
    CSS class lists for each part of the tab container.

    Every field is optional and overridable on its own. Merging a set of
    overrides onto the defaults appends the override classes to the default
    classes of the same part.
    """

    container: Optional[str] = Field(default=None, description="Outer container")
    tab_bar: Optional[str] = Field(default=None, description="Row holding the tabs")
    tab: Optional[str] = Field(default=None, description="Every tab")
    tab_active: Optional[str] = Field(default=None, description="Added to the active tab")
    tab_inactive: Optional[str] = Field(default=None, description="Added to inactive tabs")
    tab_dragging: Optional[str] = Field(default=None, description="Added to the tab being dragged")
    tab_idle: Optional[str] = Field(default=None, description="Added to tabs not being dragged")
    tab_content: Optional[str] = Field(default=None, description="Clickable area inside a tab")
    tab_label: Optional[str] = Field(default=None, description="Tab label text")
    close_button: Optional[str] = Field(default=None, description="Close button")
    close_icon: Optional[str] = Field(default=None, description="Default close icon")
    content_area: Optional[str] = Field(default=None, description="Area below the tab bar")
    active_tab_content: Optional[str] = Field(default=None, description="Wrapper of the active tab's content")
    drop_indicator: Optional[str] = Field(default=None, description="Marker shown while dragging")

    class Config:
        extra = "forbid"

    @field_validator("*", mode="before")
    @classmethod
    def _normalize_classes(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        normalized = " ".join(value.split())
        return normalized or None

    @classmethod
    def defaults(cls) -> TabStyles:
        return cls(**DEFAULT_TAB_STYLES)

    def merged_with(self, overrides: Optional[TabStyles]) -> TabStyles:
        """Return a new TabStyles with the override classes appended per field."""
        if overrides is None:
            return self.model_copy()
        merged = {}
        for name in type(self).model_fields:
            parts = [getattr(self, name), getattr(overrides, name)]
            merged[name] = " ".join(part for part in parts if part) or None
        return type(self)(**merged)

    def tab_classes(self, is_active: bool, is_dragging: bool = False) -> str:
        """Class list for one tab in the given state."""
        parts = [
            self.tab,
            self.tab_dragging if is_dragging else self.tab_idle,
            self.tab_active if is_active else self.tab_inactive,
        ]
        return " ".join(part for part in parts if part)


class CacheConfig(BaseModel):
    """Content cache configuration."""

    cache_limit: int = Field(
        default=DEFAULT_CACHE_LIMIT,
        ge=1,
        description="Maximum number of inactive tabs whose content is kept"
    )


class StoreConfig(BaseModel):
    """Tab store behavior configuration."""

    strict_tab_ids: bool = Field(
        default=False,
        description="Raise on unknown ids in set_active_tab and duplicate ids in open_tab"
    )


class DebugConfig(BaseModel):
    """Debugging and logging configuration."""

    debug_mode: bool = Field(
        default=False,
        description="Print tab and cache events to the console"
    )


class TabsConfig(BaseModel):
    """
    Main configuration object for a tab group.

    Example:
        >>> config = TabsConfig(
        ...     cache=CacheConfig(cache_limit=3),
        ...     store=StoreConfig(strict_tab_ids=True)
        ... )
        >>> provider = TabsProvider(config=config)
    """

    cache: CacheConfig = Field(
        default_factory=CacheConfig,
        description="Content cache configuration"
    )
    store: StoreConfig = Field(
        default_factory=StoreConfig,
        description="Tab store configuration"
    )
    styles: TabStyles = Field(
        default_factory=TabStyles,
        description="Style overrides merged onto the default styles"
    )
    logging: DebugConfig = Field(
        default_factory=DebugConfig,
        description="Debug and logging configuration"
    )

    def resolved_styles(self) -> TabStyles:
        """Default styles with this config's overrides applied."""
        return TabStyles.defaults().merged_with(self.styles)

    @classmethod
    def minimal(cls) -> TabsConfig:
        """
        Create a minimal configuration with defaults.

        Returns:
            TabsConfig with all default settings
        """
        return cls()

    @classmethod
    def strict(cls) -> TabsConfig:
        """
        Create a configuration that rejects unknown and duplicate tab ids.

        Returns:
            TabsConfig with strict_tab_ids enabled
        """
        return cls(store=StoreConfig(strict_tab_ids=True))

    @classmethod
    def debug(cls) -> TabsConfig:
        """
        Create a configuration optimized for debugging.

        Returns:
            TabsConfig with strict ids and console event output
        """
        return cls(
            store=StoreConfig(strict_tab_ids=True),
            logging=DebugConfig(debug_mode=True)
        )
