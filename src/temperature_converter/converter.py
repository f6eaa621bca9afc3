#!/usr/bin/env python3
"""
Converter view state
Holds the selected units and input value, derives the converted value,
and notifies subscribers whenever the state changes
"""

import logging
from threading import Lock, RLock
from typing import Callable, Dict, List

from .temperature_utils import (
    TemperatureUnit,
    UnitLike,
    convert_temperature,
    format_temperature,
    parse_number,
    parse_unit,
)

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_UNIT = TemperatureUnit.CELSIUS
DEFAULT_TARGET_UNIT = TemperatureUnit.FAHRENHEIT
DEFAULT_INPUT_VALUE = 15.0


class ConversionState:
    """Mutable record of what the user has selected and typed"""
    def __init__(self, source_unit: TemperatureUnit = DEFAULT_SOURCE_UNIT,
                 target_unit: TemperatureUnit = DEFAULT_TARGET_UNIT,
                 input_value: float = DEFAULT_INPUT_VALUE):
        self.source_unit = source_unit
        self.target_unit = target_unit
        self.input_value = input_value


class ConverterView:
    """Temperature converter state store

    All reads of the converted value are computed from the current state;
    nothing derived is cached.
    """

    def __init__(self, state: ConversionState = None):
        self.state = state if state is not None else ConversionState()
        self._lock = Lock()
        # Held while a snapshot is taken and delivered, so subscribers see
        # snapshots in the order the state changed
        self._notify_lock = RLock()
        self._subscribers: List[Callable[[Dict], None]] = []

    # ==================== SUBSCRIPTIONS ====================

    def subscribe(self, callback: Callable[[Dict], None]) -> Callable[[], None]:
        """Register a callback invoked with a state snapshot after each change

        Returns a function that removes the callback again.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        with self._notify_lock:
            snapshot = self.get_state()
            with self._lock:
                subscribers = list(self._subscribers)
            for callback in subscribers:
                try:
                    callback(snapshot)
                except Exception as e:
                    logger.error(f"Subscriber {callback!r} failed: {e}")

    # ==================== MUTATIONS ====================

    def set_source_unit(self, unit: UnitLike) -> None:
        """Select the unit the input value is expressed in"""
        unit = parse_unit(unit)
        with self._lock:
            self.state.source_unit = unit
        logger.info(f"Source unit set to {unit.display_name}")
        self._notify()

    def set_target_unit(self, unit: UnitLike) -> None:
        """Select the unit to convert into"""
        unit = parse_unit(unit)
        with self._lock:
            self.state.target_unit = unit
        logger.info(f"Target unit set to {unit.display_name}")
        self._notify()

    def set_input_value(self, value) -> bool:
        """Set the input value from a number or numeric text

        Text that does not parse as a finite number is ignored and the
        previous value is kept.

        Returns:
            True if the value was accepted
        """
        parsed = parse_number(value)
        if parsed is None:
            logger.debug(f"Ignoring non-numeric input {value!r}, "
                         f"keeping {self.state.input_value}")
            return False

        with self._lock:
            self.state.input_value = parsed
        logger.debug(f"Input value set to {parsed}")
        self._notify()
        return True

    # ==================== DERIVED VALUES ====================

    @staticmethod
    def convert(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
        return convert_temperature(value, from_unit, to_unit)

    @property
    def converted_value(self) -> float:
        with self._lock:
            value = self.state.input_value
            source = self.state.source_unit
            target = self.state.target_unit
        return self.convert(value, source, target)

    @property
    def display_value(self) -> str:
        """Converted value with two decimals and the target symbol"""
        return self.get_state()['display_value']

    @property
    def input_label(self) -> str:
        """Placeholder text for the input field"""
        return self.get_state()['input_label']

    def get_state(self) -> Dict:
        """Get a snapshot of the current state and derived values"""
        with self._lock:
            source = self.state.source_unit
            target = self.state.target_unit
            value = self.state.input_value

        converted = self.convert(value, source, target)
        return {
            'source_unit': source.display_name,
            'target_unit': target.display_name,
            'source_symbol': source.symbol,
            'target_symbol': target.symbol,
            'input_value': value,
            'input_label': f"{source.symbol} Temperature",
            'converted_value': converted,
            'display_value': format_temperature(converted, target),
        }
