from __future__ import annotations

DEFAULT_QUERY_CATEGORY = "otherElements"
DEFAULT_ROOT_HANDLE = "app"

# Longest first so the shorter prefix does not leave "Type" behind.
_TYPE_PREFIXES = ("XCUIElementType", "XCUIElement")

QUERY_CATEGORIES: frozenset[str] = frozenset(
    {
        "touchBars", "groups", "windows", "sheets", "drawers",
        "alerts", "dialogs", "buttons", "radioButtons", "radioGroups",
        "checkBoxes", "disclosureTriangles", "popUpButtons", "comboBoxes",
        "menuButtons", "toolbarButtons", "popovers", "keyboards", "keys",
        "navigationBars", "tabBars", "tabGroups", "toolbars", "statusBars",
        "tables", "tableRows", "tableColumns", "outlines", "outlineRows",
        "disclosedChildRows", "browsers", "collectionViews", "sliders",
        "pageIndicators", "progressIndicators", "activityIndicators",
        "segmentedControls", "pickers", "pickerWheels", "switches", "toggles",
        "links", "images", "icons", "searchFields", "scrollViews", "scrollBars",
        "staticTexts", "textFields", "secureTextFields", "datePickers",
        "textViews", "menus", "menuItems", "menuBars", "menuBarItems",
        "maps", "webViews", "steppers", "incrementArrows", "decrementArrows",
        "tabs", "timelines", "ratingIndicators", "valueIndicators",
        "splitGroups", "splitters", "relevanceIndicators", "colorWells",
        "helpTags", "mattes", "dockItems", "rulers", "rulerMarkers",
        "grids", "levelIndicators", "cells", "layoutAreas", "layoutItems",
        "handles", "otherElements", "statusItems",
    }
)

# Keys are normalized: lowercase, no spaces/underscores, no framework prefix.
TYPE_TO_QUERY_CATEGORY: dict[str, str] = {
    "touchbar": "touchBars",
    "group": "groups",
    "window": "windows",
    "sheet": "sheets",
    "drawer": "drawers",
    "alert": "alerts",
    "dialog": "dialogs",
    "button": "buttons",
    "radiobutton": "radioButtons",
    "radiogroup": "radioGroups",
    "checkbox": "checkBoxes",
    "disclosuretriangle": "disclosureTriangles",
    "popupbutton": "popUpButtons",
    "combobox": "comboBoxes",
    "menubutton": "menuButtons",
    "toolbarbutton": "toolbarButtons",
    "popover": "popovers",
    "keyboard": "keyboards",
    "key": "keys",
    "navigationbar": "navigationBars",
    "tabbar": "tabBars",
    "tabgroup": "tabGroups",
    "toolbar": "toolbars",
    "statusbar": "statusBars",
    "table": "tables",
    "tablerow": "tableRows",
    "tablecolumn": "tableColumns",
    "outline": "outlines",
    "outlinerow": "outlineRows",
    "disclosedchildrow": "disclosedChildRows",
    "browser": "browsers",
    "collectionview": "collectionViews",
    "slider": "sliders",
    "pageindicator": "pageIndicators",
    "progressindicator": "progressIndicators",
    "activityindicator": "activityIndicators",
    "segmentedcontrol": "segmentedControls",
    "picker": "pickers",
    "pickerwheel": "pickerWheels",
    "switch": "switches",
    "toggle": "toggles",
    "link": "links",
    "image": "images",
    "icon": "icons",
    "searchfield": "searchFields",
    "scrollview": "scrollViews",
    "scrollbar": "scrollBars",
    "statictext": "staticTexts",
    "textfield": "textFields",
    "securetextfield": "secureTextFields",
    "datepicker": "datePickers",
    "textview": "textViews",
    "menu": "menus",
    "menuitem": "menuItems",
    "menubar": "menuBars",
    "menubaritem": "menuBarItems",
    "map": "maps",
    "webview": "webViews",
    "stepper": "steppers",
    "incrementarrow": "incrementArrows",
    "decrementarrow": "decrementArrows",
    "tab": "tabs",
    "timeline": "timelines",
    "ratingindicator": "ratingIndicators",
    "valueindicator": "valueIndicators",
    "splitgroup": "splitGroups",
    "splitter": "splitters",
    "relevanceindicator": "relevanceIndicators",
    "colorwell": "colorWells",
    "helptag": "helpTags",
    "matte": "mattes",
    "dockitem": "dockItems",
    "ruler": "rulers",
    "rulermarker": "rulerMarkers",
    "grid": "grids",
    "levelindicator": "levelIndicators",
    "cell": "cells",
    "layoutarea": "layoutAreas",
    "layoutitem": "layoutItems",
    "handle": "handles",
    "otherelement": "otherElements",
    "statusitem": "statusItems",
}


def normalize_type(raw: str | None) -> str:
    value = (raw or "").strip()
    for prefix in _TYPE_PREFIXES:
        value = value.replace(prefix, "")
    value = value.replace(" ", "").replace("_", "")
    return value.lower()


def query_category(normalized: str) -> str:
    mapped = TYPE_TO_QUERY_CATEGORY.get(normalized)
    if mapped:
        return mapped
    if normalized in QUERY_CATEGORIES:
        return normalized
    return DEFAULT_QUERY_CATEGORY


def query_root(raw_type: str | None, root_handle: str = DEFAULT_ROOT_HANDLE) -> str:
    return f"{root_handle}.{query_category(normalize_type(raw_type))}"
