"""
Layout Module - Shared page shell

Every page renders through templates/layout.html. The shell has two
variants selected by the home flag:

- home:    large profile picture and the author name as <h1>
- default: small linked profile picture, author name as <h2> link and a
           "Back to home" link under the main content

Page templates extend layout.html and fill the ``content`` block; callers
that only have a fragment of markup can use render_layout() instead.
"""

from urllib.parse import quote

from flask import current_app, render_template, url_for
from markupsafe import Markup

from .head import Head
from .script import ScriptRegistry

NAME = 'Your Name'
SITE_TITLE = 'Next.js Sample Website'
SITE_DESCRIPTION = 'Learn how to build a personal website using Next.js'

OG_IMAGE_URL = (
    'https://og-image.vercel.app/{title}.png?theme=light&md=0&fontSize=75px'
    '&images=https%3A%2F%2Fassets.vercel.com%2Fimage%2Fupload%2Ffront%2Fassets'
    '%2Fdesign%2Fnextjs-black-logo.svg'
)


class LayoutContext:
    """Inputs of one layout render"""

    def __init__(self, home=False):
        self.home = bool(home)

    @property
    def variant(self):
        return 'home' if self.home else 'default'

    @property
    def profile_size(self):
        return 144 if self.home else 108


def default_head():
    """Head tags every page carries unless it overrides them"""
    return Head(
        title=SITE_TITLE,
        meta=[
            {'name': 'description', 'content': SITE_DESCRIPTION},
            {'property': 'og:image', 'content': OG_IMAGE_URL.format(title=quote(SITE_TITLE))},
            {'name': 'og:title', 'content': SITE_TITLE},
            {'name': 'twitter:card', 'content': 'summary_large_image'},
        ],
        links=[
            {'rel': 'icon', 'href': url_for('pages.favicon')},
        ],
    )


def render_page(template_name, *, home=False, head=None, scripts=(), **context):
    """
    Render a page template inside the shared layout

    Args:
        template_name: Template that extends layout.html
        home: Render the home variant of the shell
        head: Page head merged over the layout defaults
        scripts: Script declarations for this render
        **context: Extra template variables

    Returns:
        str: Rendered HTML document
    """
    registry = ScriptRegistry(scripts)

    current_app.logger.debug(f'Rendering {template_name} (layout={"home" if home else "default"})')
    return render_template(
        template_name,
        layout=LayoutContext(home),
        head=default_head().merged(head),
        scripts=registry,
        **context
    )


def render_layout(children, *, home=False, head=None, scripts=()):
    """Render the bare layout with ``children`` markup as main content"""
    return render_page('layout.html', home=home, head=head, scripts=scripts,
                       children=Markup(children))
