"""
GrammarFix - Main Flask Application
Serves the grammar correction API for the browser front end
"""
from flask import Flask, jsonify

from config_logging import get_config, get_logger, VERSION, APP_NAME
from grammarfix.routes import grammar_blueprint

logger = get_logger('grammarfix_app')


def create_app() -> Flask:
    """Build the Flask application with the grammar blueprint registered."""
    app = Flask(__name__)
    app.json.sort_keys = False
    app.register_blueprint(grammar_blueprint)

    @app.route('/api/health')
    def health():
        """Liveness check"""
        return jsonify({'status': 'ok', 'app': APP_NAME, 'version': VERSION})

    return app


app = create_app()


if __name__ == '__main__':
    config = get_config()
    is_valid, errors = config.validate()
    for error in errors:
        logger.warning(f"Configuration problem: {error}")

    print("=" * 60)
    print(f"  {APP_NAME} {VERSION}")
    print(f"  Starting server at http://{config.host}:{config.port}")
    print("=" * 60)
    app.run(host=config.host, port=config.port, debug=config.debug)
