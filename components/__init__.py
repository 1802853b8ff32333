"""
Components Package - Shared page building blocks
Layout shell, document head metadata and third-party script declarations
"""

from .head import Head
from .script import Script, ScriptRegistry, STRATEGIES
from .layout import SITE_TITLE, NAME, LayoutContext, render_page, render_layout

__all__ = [
    'Head',
    'Script',
    'ScriptRegistry',
    'STRATEGIES',
    'SITE_TITLE',
    'NAME',
    'LayoutContext',
    'render_page',
    'render_layout'
]
