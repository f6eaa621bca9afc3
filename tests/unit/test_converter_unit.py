#!/usr/bin/env python3
"""
Unit tests for converter.py
Tests the converter state store and its subscriptions
"""

import os
import sys
import threading
import unittest
from unittest.mock import MagicMock

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from temperature_converter.converter import ConversionState, ConverterView
from temperature_converter.temperature_utils import TemperatureUnit


class TestConversionState(unittest.TestCase):
    """Test ConversionState defaults"""

    def test_defaults(self):
        """Test Celsius to Fahrenheit, 15.0 by default"""
        state = ConversionState()
        self.assertIs(state.source_unit, TemperatureUnit.CELSIUS)
        self.assertIs(state.target_unit, TemperatureUnit.FAHRENHEIT)
        self.assertEqual(state.input_value, 15.0)


class TestConverterView(unittest.TestCase):
    """Test ConverterView mutations and derived values"""

    def setUp(self):
        self.view = ConverterView()

    def test_initial_display(self):
        """Test default state shows 59.00 °F"""
        self.assertEqual(self.view.display_value, '59.00 °F')
        self.assertAlmostEqual(self.view.converted_value, 59.0, places=9)
        self.assertEqual(self.view.input_label, '°C Temperature')

    def test_set_source_unit(self):
        """Test changing source unit recomputes the output"""
        self.view.set_source_unit(TemperatureUnit.KELVIN)
        self.assertIs(self.view.state.source_unit, TemperatureUnit.KELVIN)
        self.assertEqual(self.view.display_value, '-432.67 °F')
        self.assertEqual(self.view.input_label, 'K Temperature')

    def test_set_target_unit(self):
        """Test changing target unit recomputes the output"""
        self.view.set_target_unit('Kelvin')
        self.assertEqual(self.view.display_value, '288.15 K')

    def test_same_units_show_input(self):
        """Test same source and target echo the input"""
        self.view.set_target_unit(TemperatureUnit.CELSIUS)
        self.assertEqual(self.view.converted_value, 15.0)
        self.assertEqual(self.view.display_value, '15.00 °C')

    def test_set_unit_invalid(self):
        """Test unknown unit raises and leaves state alone"""
        with self.assertRaises(ValueError):
            self.view.set_source_unit('Rankine')
        self.assertIs(self.view.state.source_unit, TemperatureUnit.CELSIUS)

    def test_set_input_value_text(self):
        """Test numeric text is parsed"""
        self.assertTrue(self.view.set_input_value('100'))
        self.assertEqual(self.view.state.input_value, 100.0)
        self.assertEqual(self.view.display_value, '212.00 °F')

    def test_set_input_value_invalid_keeps_previous(self):
        """Test non-numeric text keeps the last valid value"""
        self.view.set_input_value(20.0)
        before = self.view.display_value

        self.assertFalse(self.view.set_input_value('abc'))
        self.assertEqual(self.view.state.input_value, 20.0)
        self.assertEqual(self.view.display_value, before)
        self.assertEqual(before, '68.00 °F')

    def test_set_input_value_rejects_non_finite(self):
        """Test nan and inf are treated as invalid"""
        self.assertFalse(self.view.set_input_value('nan'))
        self.assertFalse(self.view.set_input_value(float('inf')))
        self.assertEqual(self.view.state.input_value, 15.0)

    def test_convert_is_pure(self):
        """Test static convert does not touch state"""
        self.assertEqual(ConverterView.convert(0.0, 'C', 'F'), 32.0)
        self.assertEqual(self.view.state.input_value, 15.0)

    def test_get_state(self):
        """Test snapshot contents"""
        state = self.view.get_state()
        self.assertEqual(state['source_unit'], 'Celsius')
        self.assertEqual(state['target_unit'], 'Fahrenheit')
        self.assertEqual(state['source_symbol'], '°C')
        self.assertEqual(state['target_symbol'], '°F')
        self.assertEqual(state['input_value'], 15.0)
        self.assertEqual(state['display_value'], '59.00 °F')
        self.assertEqual(state['input_label'], '°C Temperature')

    def test_custom_initial_state(self):
        """Test a store built from an explicit state"""
        view = ConverterView(ConversionState(TemperatureUnit.FAHRENHEIT,
                                             TemperatureUnit.KELVIN, 32.0))
        self.assertEqual(view.display_value, '273.15 K')


class TestSubscriptions(unittest.TestCase):
    """Test change notifications"""

    def setUp(self):
        self.view = ConverterView()
        self.callback = MagicMock()
        self.unsubscribe = self.view.subscribe(self.callback)

    def test_notified_on_each_mutation(self):
        self.view.set_source_unit('F')
        self.view.set_target_unit('C')
        self.view.set_input_value('212')

        self.assertEqual(self.callback.call_count, 3)
        last_state = self.callback.call_args[0][0]
        self.assertEqual(last_state['display_value'], '100.00 °C')

    def test_not_notified_on_rejected_input(self):
        self.view.set_input_value('not a number')
        self.callback.assert_not_called()

    def test_unsubscribe(self):
        self.unsubscribe()
        self.view.set_input_value(1)
        self.callback.assert_not_called()

        # Second call is harmless
        self.unsubscribe()

    def test_failing_subscriber_does_not_block_others(self):
        failing = MagicMock(side_effect=RuntimeError('boom'))
        later = MagicMock()
        self.view.subscribe(failing)
        self.view.subscribe(later)

        self.view.set_input_value(30)

        self.assertEqual(self.view.state.input_value, 30.0)
        failing.assert_called_once()
        later.assert_called_once()
        self.callback.assert_called_once()

    def test_last_snapshot_matches_final_state_under_threads(self):
        """Test concurrent edits leave subscribers on the latest state"""
        seen = []
        self.view.subscribe(seen.append)

        def worker(offset):
            for i in range(50):
                self.view.set_input_value(offset * 1000 + i)
                self.view.set_target_unit(['C', 'F', 'K'][i % 3])

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(seen), 8 * 50 * 2)
        self.assertEqual(seen[-1], self.view.get_state())

    def test_subscriber_may_mutate(self):
        """Test a subscriber can change the state without deadlocking"""
        def clamp(state):
            if state['input_value'] > 100:
                self.view.set_input_value(100)

        self.view.subscribe(clamp)
        self.view.set_input_value(500)
        self.assertEqual(self.view.state.input_value, 100.0)


if __name__ == '__main__':
    unittest.main()
