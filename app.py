import os
import time
import logging
import click
from logging.handlers import RotatingFileHandler
from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException
from config import config
from extensions import db, migrate, login_manager, limiter
from utils.errors import FamilyTrackerError


def configure_logging(app):
    """Configure application logging"""
    if not app.debug and not app.testing:
        # Create logs directory if it doesn't exist
        if not os.path.exists('logs'):
            os.mkdir('logs')

        # File handler for errors
        file_handler = RotatingFileHandler(
            'logs/family_tracker.log',
            maxBytes=10240000,  # 10MB
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s '
            '[in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('Family Tracker startup')
    else:
        # Development logging to console
        app.logger.setLevel(logging.DEBUG)
        app.logger.info('Family Tracker startup (DEBUG mode)')


def create_app(config_name=None):
    """Application factory pattern"""

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    os.makedirs(app.instance_path, exist_ok=True)

    # Configure logging
    configure_logging(app)
    config[config_name].init_app(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    limiter.init_app(app)

    # Services are built once here and shared by every request
    from services import init_services, get_services
    init_services(app, db)

    # Add security headers
    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        headers = app.config.get('SECURITY_HEADERS', {})
        for header, value in headers.items():
            response.headers[header] = value
        return response

    # ── API request logging ───────────────────────────────────────────────
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_api_request(response):
        if request.path.startswith('/api'):
            started = g.get('request_started')
            duration_ms = (time.perf_counter() - started) * 1000 if started else 0
            app.logger.info('%s %s %s in %dms', request.method, request.path,
                            response.status_code, duration_ms)
        return response

    # User loader callback for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        return get_services().storage.get_user(int(user_id))

    # The API has no login page: anonymous callers get a bare 401
    @login_manager.unauthorized_handler
    def unauthorized():
        return '', 401

    # Import models to ensure they're registered with SQLAlchemy
    with app.app_context():
        import models  # noqa: F401

    # Register blueprints
    from blueprints.auth import auth_bp
    from blueprints.family import family_bp
    from blueprints.invites import invites_bp
    from blueprints.activities import activities_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(family_bp)
    app.register_blueprint(invites_bp)
    app.register_blueprint(activities_bp)

    # Create database tables
    with app.app_context():
        db.create_all()

    # Register error handlers
    register_error_handlers(app)

    # Register CLI commands
    register_commands(app)

    return app


def register_error_handlers(app):
    """Register global error handlers. Every error leaves the API as JSON."""

    @app.errorhandler(FamilyTrackerError)
    def handle_app_error(error):
        return jsonify({'error': error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        app.logger.exception(f'Internal Server Error: {error}')
        return jsonify({'message': 'Internal Server Error'}), 500


def register_commands(app):
    """Register Flask CLI commands."""

    @app.cli.group()
    def invites():
        """Inspect and resend family invites."""
        pass

    @invites.command('pending')
    @click.option('--family-id', type=int, default=None, help='Only show invites for this family.')
    def list_pending_invites(family_id):
        """List invites that have not been accepted yet."""
        from services import get_services
        services = get_services()
        pending = services.storage.get_pending_members(family_id)
        if not pending:
            click.echo('No pending invites found.')
            return
        click.echo(f'{"ID":<5} {"Family":<25} {"Email":<40} {"Role":<8}')
        click.echo('-' * 80)
        for member in pending:
            click.echo(f'{member.id:<5} {member.family.name:<25} {member.invite_email:<40} {member.role:<8}')
            click.echo(f'      {services.invites.build_invite_url(member.invite_token)}')

    @invites.command('resend')
    @click.argument('token')
    def resend_invite(token):
        """Send the invite email for TOKEN again."""
        from services import get_services
        try:
            invitation = get_services().invites.resend_invite(token)
        except FamilyTrackerError as e:
            raise click.ClickException(e.message)
        if invitation.email_sent:
            click.echo(f'SUCCESS: Invite email re-sent to {invitation.member.invite_email}.')
        else:
            click.echo(f'Email not sent. Share this link instead: {invitation.invite_url}')


if __name__ == '__main__':
    app = create_app()
    # SECURITY: Only bind to localhost in development
    # Never use 0.0.0.0 with debug mode - it exposes the debugger to the network
    app.run(host='127.0.0.1', port=5000, debug=True)
