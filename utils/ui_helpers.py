"""
UI Helper Functions for Blueprint-Specific Styling
===================================================

Stylesheets are picked per Blueprint so each section of the site only pulls
the CSS it uses. Templates read the class-name tokens from UTIL_STYLES
instead of hard-coding them; the values are opaque to the views.

Usage:
1. Add the CSS file under static/css/
2. Register it in the map inside get_blueprint_styles()
3. The layout links it automatically
"""

from flask import request
from typing import List, Dict, Optional


# Shared utility class names (static/css/utils.css)
UTIL_STYLES = {
    'heading2Xl': 'heading2Xl',
    'headingXl': 'headingXl',
    'headingLg': 'headingLg',
    'headingMd': 'headingMd',
    'borderCircle': 'borderCircle',
    'colorInherit': 'colorInherit',
    'lightText': 'lightText',
}

# Loaded on every page
BASE_STYLES = [
    'css/global.css',
    'css/layout.css',
    'css/utils.css',
]


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    Get the CSS files for a Blueprint

    Args:
        blueprint_name: Blueprint name (e.g. 'pages', 'posts')

    Returns:
        list: Static paths of the CSS files, base styles first

    Example:
        >>> get_blueprint_styles('posts')
        ['css/global.css', 'css/layout.css', 'css/utils.css']
    """
    blueprint_css_map = {
        'pages': [
            # page-only stylesheets go here
        ],
        'posts': [
            # post-only stylesheets go here
        ],
    }

    return BASE_STYLES + blueprint_css_map.get(blueprint_name, [])


def inject_blueprint_assets() -> Dict[str, object]:
    """
    Context processor payload with the assets of the active Blueprint

    Returns:
        dict:
            - blueprint_styles: CSS files to link
            - current_blueprint: name of the active Blueprint
            - util_styles: class-name tokens
    """
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'current_blueprint': blueprint_name,
        'util_styles': UTIL_STYLES,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    Get the CSS class for the <body> of a page

    Args:
        blueprint_name: Blueprint name
        route_name: Endpoint name inside the Blueprint (optional)

    Returns:
        str: Space separated classes

    Example:
        >>> get_page_specific_class('posts', 'first_post')
        'page-posts page-posts-first_post'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)
