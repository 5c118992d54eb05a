# core/navigation.py

from dataclasses import dataclass


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str
    signed_in_only: bool = False


NAV_ITEMS = (
    NavItem("Home", "/"),
    NavItem("Companion", "/companion/"),
    NavItem("My Journey", "/my-journey/"),
    NavItem("Dashboard", "/dashboard/", signed_in_only=True),
)


def is_active(item, current_path):
    """Home is only active on '/', other links also on their sub-pages."""
    if item.href == "/":
        return current_path == "/"
    return current_path.startswith(item.href)


def build_nav_items(current_path, is_signed_in):
    """
    Returns the links to render, each with an `active` flag.
    Links reserved to signed-in users are left out for visitors.
    """
    return [
        {'label': item.label, 'href': item.href, 'active': is_active(item, current_path)}
        for item in NAV_ITEMS
        if is_signed_in or not item.signed_in_only
    ]
