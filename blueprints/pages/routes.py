"""
Pages Routes - Public static pages
"""

from flask import current_app, url_for
from components import Head, SITE_TITLE, render_page
from utils.seo import build_sitemap, build_robots_txt, site_base_url
from . import pages_bp


@pages_bp.route('/')
def index():
    """Home page - about the author"""
    return render_page('pages/index.html',
                       home=True,
                       head=Head(title=SITE_TITLE))


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate sitemap for SEO"""
    paths = [
        (url_for('pages.index'), 'weekly', '1.0'),
        (url_for('posts.first_post'), 'monthly', '0.8'),
    ]
    xml = build_sitemap(paths, site_base_url())

    response = current_app.make_response(xml)
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    response = current_app.make_response(build_robots_txt(site_base_url()))
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response


@pages_bp.route('/favicon.ico')
def favicon():
    """Serve favicon"""
    return current_app.send_static_file('favicon.svg')
