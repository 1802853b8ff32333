"""
Posts Routes - Blog posts
"""

from flask import current_app
from components import Head, Script, render_page
from components.script import LAZY_ONLOAD
from . import posts_bp


@posts_bp.route('/first-post')
def first_post():
    """First blog post, loads the Facebook SDK once the page is idle"""
    facebook_sdk = Script(
        src=current_app.config['FACEBOOK_SDK_URL'],
        strategy=LAZY_ONLOAD,
        on_load="console.log('script loaded correctly, window.FB has been populated');"
    )
    return render_page('posts/first_post.html',
                       head=Head(title='First Post'),
                       scripts=[facebook_sdk])
