import logging

from flask import Flask, has_request_context, request

from config import get_config
from services import (
    format_quantity,
    scale_quantity,
    scale_servings_text,
    format_scale_factor,
    format_ingredient_line,
    increase_scale,
    decrease_scale,
    is_at_min,
    is_at_max,
    parse_scale_factor,
)

DEFAULT_LOG_LEVEL = 'INFO'


def scaled_fraction(quantity, scale_factor=1):
    """Jinja filter: scale a quantity and format it as a fraction."""
    return format_quantity(scale_quantity(quantity, scale_factor))


def register_filters(app):
    """Register the quantity filters on the app's Jinja environment."""
    app.jinja_env.filters['fraction'] = format_quantity
    app.jinja_env.filters['scaled'] = scaled_fraction
    app.jinja_env.filters['scale_servings'] = scale_servings_text
    app.jinja_env.filters['scale_factor'] = format_scale_factor
    app.jinja_env.filters['ingredient_line'] = format_ingredient_line


def resolve_log_level(value):
    """Upper-cased level name, or None if logging doesn't know it."""
    name = str(value or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(name), int):
        return None
    return name


def configure_logging(app):
    level = resolve_log_level(app.config.get('LOG_LEVEL'))
    logging.basicConfig(
        level=level or DEFAULT_LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app.logger.setLevel(level or DEFAULT_LOG_LEVEL)
    if level is None:
        app.logger.warning(
            "Unknown LOG_LEVEL %r, using %s", app.config.get('LOG_LEVEL'), DEFAULT_LOG_LEVEL
        )


def register_scale_controls(app):
    """Expose the scale selector bounds and helpers to templates."""
    bounds = {
        'min': app.config['SCALE_MIN'],
        'max': app.config['SCALE_MAX'],
        'step': app.config['SCALE_STEP'],
        'default': app.config['DEFAULT_SCALE_FACTOR'],
    }

    def current_scale():
        """Scale factor from the ?scale= query argument."""
        raw = request.args.get('scale') if has_request_context() else None
        return parse_scale_factor(raw, bounds['default'], bounds['min'], bounds['max'])

    def scale_up(value):
        return increase_scale(value, bounds['step'], bounds['max'])

    def scale_down(value):
        return decrease_scale(value, bounds['step'], bounds['min'])

    @app.context_processor
    def inject_scale_controls():
        return {
            'scale_bounds': bounds,
            'current_scale': current_scale,
            'scale_up': scale_up,
            'scale_down': scale_down,
            'scale_at_min': lambda value: is_at_min(value, bounds['min']),
            'scale_at_max': lambda value: is_at_max(value, bounds['max']),
        }


def create_app(env=None):
    """Create the Flask app for the given environment name."""
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    configure_logging(app)

    # Register Jinja filters for quantity display
    register_filters(app)
    register_scale_controls(app)

    app.logger.info(
        "Quantity app ready (debug=%s, scale %s-%s step %s)",
        app.config.get('DEBUG', False),
        app.config['SCALE_MIN'],
        app.config['SCALE_MAX'],
        app.config['SCALE_STEP'],
    )
    return app


app = create_app()


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
