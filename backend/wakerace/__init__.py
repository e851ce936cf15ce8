from datetime import timedelta

from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def _engine_options(config):
    """SQLite writers wait on the database lock instead of failing fast."""
    options = dict(config.get('SQLALCHEMY_ENGINE_OPTIONS') or {})
    uri = config.get('SQLALCHEMY_DATABASE_URI') or ''
    if uri.startswith('sqlite'):
        connect_args = dict(options.get('connect_args') or {})
        connect_args.setdefault('timeout', int(config.get('SQLITE_BUSY_TIMEOUT_SEC', 30)))
        connect_args.setdefault('check_same_thread', False)
        options['connect_args'] = connect_args
    return options


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.config['SQLALCHEMY_ENGINE_OPTIONS'] = _engine_options(flask_app.config)
    flask_app.permanent_session_lifetime = timedelta(days=int(flask_app.config.get('SESSION_LIFETIME_DAYS', 30)))
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from wakerace.main import main
    flask_app.register_blueprint(main)

    from wakerace.api.rooms import rooms
    from wakerace.api.participants import participants
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')
    flask_app.register_blueprint(participants, url_prefix='/api/participants')

    from wakerace.services.race.errors import RaceError

    @flask_app.errorhandler(RaceError)
    def handle_race_error(exc):
        return jsonify({'error': exc.message}), exc.status_code

    from wakerace.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('db-reset')
    @click.option('--seed/--no-seed', default=False, help='Create a demo room with two sleepers.')
    def db_reset_command(seed):
        """Drops and recreates the database, optionally seeding a demo room."""
        from wakerace.services.race import create_room, join_room
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            if seed:
                room = create_room()
                for nickname in ('early_bird', 'night_owl'):
                    join_room(room.id, nickname)
                click.echo(f'Seeded room {room.id}')
            click.echo('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
