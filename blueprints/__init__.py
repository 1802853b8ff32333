"""
Blueprints Package - Modular application structure
Each blueprint handles a specific section of the site
"""

__all__ = ['pages', 'posts']
