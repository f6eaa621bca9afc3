#!/usr/bin/env python3
"""
Web interface for the temperature converter
Flask-based single page with a small JSON API behind it
"""

import logging
from typing import Dict, Optional
from flask import Flask, Response, render_template, jsonify, request

from .converter import ConverterView
from .temperature_utils import TemperatureUnit, convert_temperature, parse_number, parse_unit

logger = logging.getLogger(__name__)

app = Flask(__name__)

TITLE = "Temperature Converter"

converter = ConverterView()
display = None  # Panel renderer (set by the app when enabled)


def set_converter(view: ConverterView) -> None:
    """Set the state store the routes read from and write to"""
    global converter
    converter = view


def get_converter() -> ConverterView:
    return converter


def set_display(panel) -> None:
    """Set display reference for the PNG snapshot route"""
    global display
    display = panel


def _unit_table():
    return [
        {'name': unit.name, 'display_name': unit.display_name, 'symbol': unit.symbol}
        for unit in TemperatureUnit
    ]


def _json_body() -> Optional[Dict]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


@app.route('/')
def index():
    """Converter page"""
    return render_template('converter.html',
                           title=TITLE,
                           units=_unit_table(),
                           state=converter.get_state())


@app.route('/api/state')
def api_state():
    """API endpoint for the current converter state"""
    return jsonify(converter.get_state())


@app.route('/api/units')
def api_units():
    """API endpoint listing the selectable units"""
    return jsonify({'units': _unit_table()})


def _set_unit(setter):
    data = _json_body()
    if data is None:
        return jsonify({'error': 'Expected a JSON object body'}), 400

    try:
        setter(data.get('unit', ''))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify(converter.get_state())


@app.route('/api/source', methods=['POST'])
def api_set_source():
    """API endpoint to select the source unit"""
    return _set_unit(converter.set_source_unit)


@app.route('/api/target', methods=['POST'])
def api_set_target():
    """API endpoint to select the target unit"""
    return _set_unit(converter.set_target_unit)


@app.route('/api/input', methods=['POST'])
def api_set_input():
    """API endpoint to set the input value

    Non-numeric text is not an error: the previous value is kept and
    'accepted' is false.
    """
    data = _json_body()
    if data is None:
        return jsonify({'error': 'Expected a JSON object body'}), 400

    accepted = converter.set_input_value(data.get('value'))
    state = converter.get_state()
    state['accepted'] = accepted
    return jsonify(state)


@app.route('/api/convert')
def api_convert():
    """Stateless conversion: /api/convert?value=15&from=C&to=F"""
    value = parse_number(request.args.get('value', ''))
    if value is None:
        return jsonify({'error': 'value must be a number'}), 400

    try:
        source = parse_unit(request.args.get('from', ''))
        target = parse_unit(request.args.get('to', ''))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({
        'value': value,
        'from': source.display_name,
        'to': target.display_name,
        'result': convert_temperature(value, source, target),
    })


@app.route('/display.png')
def display_png():
    """Latest rendered converter panel"""
    if not display:
        return jsonify({'error': 'Display not available'}), 503

    png = display.render_png()
    if png is None:
        return jsonify({'error': 'Display not rendered yet'}), 503
    return Response(png, mimetype='image/png')


def run_web_server(host='127.0.0.1', port=5000, debug=False):
    """Run Flask web server (blocking)"""
    logger.info(f"Serving {TITLE} on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug, use_reloader=False)


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    print("Starting web interface on http://127.0.0.1:5000")
    app.run(host='127.0.0.1', port=5000, debug=True)
