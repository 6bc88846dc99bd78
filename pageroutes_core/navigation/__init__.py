"""Navigation module - Client-side navigation by route name."""

from pageroutes_core.navigation.navigator import Navigator, link_props

__all__ = [
    "Navigator",
    "link_props",
]
