import os


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    SEND_FILE_MAX_AGE_DEFAULT = 3600

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Absolute site URL used in sitemap.xml; request root is used when empty
    SITE_URL = os.environ.get('SITE_URL', '')

    # Third-party scripts
    FACEBOOK_SDK_URL = 'https://connect.facebook.net/en_US/sdk.js'

    # Security Headers
    CONTENT_SECURITY_POLICY = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' https://connect.facebook.net; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https://og-image.vercel.app; "
        "connect-src 'self' https://*.facebook.com; "
        "frame-src https://*.facebook.com; "
        "frame-ancestors 'self';"
    )


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
    SEND_FILE_MAX_AGE_DEFAULT = 0


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SITE_URL = 'http://localhost'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
