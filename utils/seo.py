"""
SEO Helpers - sitemap.xml and robots.txt bodies
"""

from datetime import datetime
from flask import current_app, request


def site_base_url():
    """Absolute site URL without trailing slash (SITE_URL or request root)"""
    return (current_app.config.get('SITE_URL') or request.url_root).rstrip('/')


def build_sitemap(paths, base_url):
    """
    Build a sitemap document

    Args:
        paths (list): (path, changefreq, priority) tuples
        base_url (str): Absolute site URL without trailing slash

    Returns:
        str: XML urlset
    """
    lastmod = datetime.now().strftime('%Y-%m-%d')

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for path, changefreq, priority in paths:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{base_url}{path}</loc>')
        sitemap_xml.append(f'<lastmod>{lastmod}</lastmod>')
        sitemap_xml.append(f'<changefreq>{changefreq}</changefreq>')
        sitemap_xml.append(f'<priority>{priority}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')
    return '\n'.join(sitemap_xml)


def build_robots_txt(base_url):
    return (
        "User-agent: *\n"
        "Allow: /\n"
        "Disallow: /static/\n"
        "\n"
        f"Sitemap: {base_url}/sitemap.xml\n"
    )
