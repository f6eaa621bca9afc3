"""
Temperature Converter
Celsius, Fahrenheit and Kelvin conversion with a Flask web interface
"""

__version__ = '1.0.0'
