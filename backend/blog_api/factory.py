"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from blog_api.core.config import BaseConfig, get_config, validate_config
from blog_api.core.logger import configure_logging, init_app as init_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :param config: Config object, class or import string. Defaults to the
        class selected by ``APP_ENV``.
    :raises RuntimeError: A required setting is missing or the store cannot be
        reached. Nothing is served in that case.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    validate_config(app.config)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from blog_api.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from blog_api.api import init_app as init_api

    init_api(app)

    from blog_api.core import errors

    errors.init_app(app)

    from blog_api import cli as app_cli

    app_cli.init_app(app)

    return app
