# wsgi.py

import logging
import os

from engine import create_app

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)

CONFIG_OBJECTS = {
    'development': 'web_config.DevelopmentConfig',
    'production': 'web_config.ProductionConfig',
}

try:
    # Create the Flask application instance
    config_object = CONFIG_OBJECTS.get(os.getenv('FLASK_ENV'), 'web_config.Config')
    flask_app = create_app(config_object)
except Exception as e:
    logger.error(f"Failed to initialize application: {e}", exc_info=True)
    raise

# Expose the Flask application as the WSGI application
application = flask_app

# For development server only
if __name__ == "__main__":
    flask_app.run(
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', 3000)),
        debug=flask_app.config.get('ENVIRONMENT') == 'development',
    )
