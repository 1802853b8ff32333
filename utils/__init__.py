"""
Utils Package - Centralized utility modules initialization
"""

from .ui_helpers import (
    UTIL_STYLES,
    get_blueprint_styles,
    inject_blueprint_assets,
    get_page_specific_class
)
from .seo import build_sitemap, build_robots_txt, site_base_url

__all__ = [
    # UI Helpers
    'UTIL_STYLES',
    'get_blueprint_styles',
    'inject_blueprint_assets',
    'get_page_specific_class',

    # SEO
    'build_sitemap',
    'build_robots_txt',
    'site_base_url'
]
