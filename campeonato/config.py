import os


class Config:
    # Server
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '8080'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    
    # Redis (empty disables change events)
    REDIS_URL = os.getenv('REDIS_URL', '')
    EVENTS_CHANNEL = os.getenv('EVENTS_CHANNEL', 'torneios:events')
    EVENT_LOG_KEY = os.getenv('EVENT_LOG_KEY', 'torneios:event_log')
    EVENT_LOG_SIZE = int(os.getenv('EVENT_LOG_SIZE', '1000'))


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    REDIS_URL = ''


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
