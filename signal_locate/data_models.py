#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# -----------------------------------------------------------------------------
# Signal Locate
#
# signal_locate/data_models.py
#
# Description:
# Data model classes for Signal Locate. Contains heatmap samples and the WiFi
# measurements recorded on a room plan, plus helpers that turn measurements
# into pixel-space samples.
# -----------------------------------------------------------------------------

import json
from typing import NamedTuple

# RSSI range mapped onto [0, 1] signal strength (dBm)
MIN_RSSI = -100.0
MAX_RSSI = -35.0


class Sample(NamedTuple):
    """A weighted point observation in pixel coordinates."""
    x: float
    y: float
    strength: float


class WiFiMeasurement:
    """
    Represents a signal reading taken at a point on the room plan.

    Coordinates are proportional to the plan size (0.0 - 1.0) so the same
    measurement can be placed on the plan at any resolution.
    """
    def __init__(self, ssid, strength, prop_x, prop_y):
        self.ssid = ssid
        self.strength = strength
        self.prop_x = prop_x
        self.prop_y = prop_y

    def to_sample(self, width, height):
        """Place the measurement on a width x height pixel grid."""
        return Sample(self.prop_x * width, self.prop_y * height, self.strength)

    def to_dict(self):
        return {
            'ssid': self.ssid,
            'strength': self.strength,
            'prop_x': self.prop_x,
            'prop_y': self.prop_y
        }

    @classmethod
    def from_dict(cls, data, min_rssi=MIN_RSSI, max_rssi=MAX_RSSI):
        """
        Create WiFiMeasurement instance from dictionary.

        The reading may be given either as a normalized 'strength' or as a raw
        'rssi' in dBm, which is converted with rssi_to_strength().
        """
        if 'strength' in data:
            strength = float(data['strength'])
        elif 'rssi' in data:
            strength = rssi_to_strength(float(data['rssi']), min_rssi, max_rssi)
        else:
            raise KeyError("Measurement needs either 'strength' or 'rssi'")

        return cls(
            ssid=data.get('ssid', ''),
            strength=strength,
            prop_x=float(data['prop_x']),
            prop_y=float(data['prop_y'])
        )

    def __eq__(self, other):
        if not isinstance(other, WiFiMeasurement):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"WiFiMeasurement(ssid={self.ssid!r}, strength={self.strength}, "
                f"prop_x={self.prop_x}, prop_y={self.prop_y})")


def rssi_to_strength(rssi, min_rssi=MIN_RSSI, max_rssi=MAX_RSSI):
    """
    Map an RSSI reading in dBm linearly onto [0, 1].

    Readings at or below min_rssi give 0.0, at or above max_rssi give 1.0.
    """
    if max_rssi <= min_rssi:
        raise ValueError(f"max_rssi ({max_rssi}) must be greater than min_rssi ({min_rssi})")
    normalized = (rssi - min_rssi) / (max_rssi - min_rssi)
    return min(max(normalized, 0.0), 1.0)


def filter_by_ssid(measurements, ssid=None):
    """
    Keep only the measurements taken for one network.

    An empty or None ssid keeps every measurement.
    """
    if not ssid:
        return list(measurements)
    return [m for m in measurements if m.ssid == ssid]


def measurements_to_samples(measurements, width, height):
    """Convert proportional measurements to pixel-space samples for a width x height image."""
    return [m.to_sample(width, height) for m in measurements]


def load_measurements(file_path, min_rssi=MIN_RSSI, max_rssi=MAX_RSSI):
    """
    Read measurements from a JSON file.

    The file holds either a list of measurement objects or an object with a
    'measurements' list.
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('measurements', [])
    if not isinstance(data, list):
        raise ValueError(f"Measurement file '{file_path}' does not contain a list of measurements")

    return [WiFiMeasurement.from_dict(item, min_rssi, max_rssi) for item in data]
