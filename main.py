#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# -----------------------------------------------------------------------------
# Signal Locate
#
# main.py
#
# Description:
# Command line entry point for Signal Locate. Loads a room plan and recorded
# WiFi measurements, renders the signal strength heatmap and saves it blended
# over the room plan.
# -----------------------------------------------------------------------------

import argparse
import os
import sys

import numpy as np

from signal_locate.compositor import overlay
from signal_locate.config_manager import ConfigManager, default_config_path
from signal_locate.data_models import filter_by_ssid, load_measurements, measurements_to_samples
from signal_locate.errors import DimensionMismatch, HeatmapError, ImageIOError
from signal_locate.heatmap_generator import HeatmapGenerator, generate_random_samples, suggest_radius
from signal_locate.image_io import load_raster, save_raster


def build_parser():
    parser = argparse.ArgumentParser(
        prog="signal-locate",
        description="Create a WiFi signal strength heatmap over a room plan."
    )
    parser.add_argument("--floor-plan", help="Room plan image to draw the heatmap over")
    parser.add_argument("--measurements", help="JSON file with recorded measurements")
    parser.add_argument("--ssid", default="", help="Only use measurements of this network")
    parser.add_argument("--output", help="Output PNG (default: heatmap_<ssid>.png)")
    parser.add_argument("--radius", type=float, help="Kernel radius in pixels")
    parser.add_argument("--random", type=int, metavar="N",
                        help="Use N random samples instead of measurements")
    parser.add_argument("--seed", type=int, help="Random seed for --random")
    parser.add_argument("--width", type=int, help="Heatmap width when no room plan is loaded")
    parser.add_argument("--height", type=int, help="Heatmap height when no room plan is loaded")
    parser.add_argument("--config", default=None,
                        help=f"Configuration file (default: {default_config_path()})")
    return parser


def default_output_path(ssid):
    return f"heatmap_{ssid}.png" if ssid else "heatmap.png"


def _status(percent, debug_mode):
    if debug_mode:
        print(f"DEBUG: Generating heatmap... {percent}%")


def run(args, config_manager, debug_mode=False):
    """
    Run the create-heatmap flow.

    Returns:
        Process exit status: 0 on success, 1 on error
    """
    output_path = args.output or default_output_path(args.ssid)

    # Load the room plan first, its size decides the heatmap size
    base_image = None
    if args.floor_plan:
        try:
            base_image = load_raster(args.floor_plan)
            if debug_mode:
                print(f"DEBUG: Loaded room plan '{args.floor_plan}' with shape {base_image.shape}")
        except ImageIOError as e:
            print(f"Warning: Could not load room plan: {e}")

    if base_image is not None:
        height, width = base_image.shape[:2]
    elif args.width and args.height:
        width, height = args.width, args.height
    elif args.random and not args.floor_plan:
        width, height = 1920, 1080
    else:
        print("Error: No room plan loaded. Pass --floor-plan, or --width and --height.")
        return 1

    if args.random:
        rng = np.random.default_rng(args.seed)
        samples = generate_random_samples(args.random, width, height, rng)
    elif args.measurements:
        try:
            measurements = load_measurements(
                args.measurements,
                min_rssi=config_manager.get("min_rssi"),
                max_rssi=config_manager.get("max_rssi")
            )
        except (OSError, ValueError, KeyError) as e:
            print(f"Error loading measurements '{args.measurements}': {e}")
            return 1
        measurements = filter_by_ssid(measurements, args.ssid)
        samples = measurements_to_samples(measurements, width, height)
    else:
        print("Error: Pass --measurements or --random.")
        return 1

    if not samples:
        print("Error: No measurements found. Take some measurements first.")
        return 1

    radius = args.radius
    if radius is None and config_manager.get("radius") is not None:
        try:
            radius = float(config_manager.get("radius"))
        except (TypeError, ValueError):
            print(f"Error: Invalid radius in configuration: {config_manager.get('radius')!r}")
            return 1
    if radius is None:
        radius = suggest_radius(width, len(samples))
    if debug_mode:
        print(f"DEBUG: {len(samples)} samples on {width}x{height}, radius {radius}")

    try:
        generator = HeatmapGenerator(
            width, height,
            gradient_colors=config_manager.get("gradient_colors"),
            interpolation=config_manager.get("interpolation"),
            debug_mode=debug_mode
        )
        heatmap = generator.generate_heatmap(
            samples, radius, status_callback=lambda pct: _status(pct, debug_mode)
        )
    except HeatmapError as e:
        print(f"Error generating heatmap: {e}")
        return 1

    result = heatmap
    if base_image is not None:
        # The heatmap takes the plan's size, but a plan raster that is not
        # plain RGB still cannot be blended
        try:
            result = overlay(
                base_image, heatmap,
                base_weight=config_manager.get("base_weight"),
                heatmap_weight=config_manager.get("heatmap_weight")
            )
        except DimensionMismatch as e:
            print(f"Warning: Could not overlay heatmap on room plan ({e}). Only saving heatmap.")
    elif args.floor_plan:
        print("Warning: Could not load image for overlaying. Only saving heatmap.")

    try:
        save_raster(result, output_path)
    except ImageIOError as e:
        print(f"Error: Failed to save heatmap: {e}")
        return 1

    print(f"Successfully created heatmap: {output_path}")
    return 0


def main(argv=None):
    """
    Main entry point for Signal Locate.
    Loads configuration and runs the create-heatmap flow.
    """
    args = build_parser().parse_args(argv)

    # Set SIGNAL_LOCATE_DEBUG=1 (or True/true) in your environment to enable debug logging.
    debug_mode = os.environ.get("SIGNAL_LOCATE_DEBUG", "0").lower() in ("1", "true")
    if debug_mode:
        print("DEBUG: SIGNAL_LOCATE_DEBUG environment variable detected. Debug mode is ON.")

    config_manager = ConfigManager(args.config)
    if debug_mode:
        print(f"DEBUG: Configuration file path: {config_manager.config_file_path}")

    return run(args, config_manager, debug_mode=debug_mode)


if __name__ == '__main__':
    sys.exit(main())
