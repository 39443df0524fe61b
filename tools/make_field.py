#!/usr/bin/env python3
"""
Distance-field CLI: read an image, write its uint8 distance field.
"""

import sys
import os
import argparse
import yaml

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import cv2
from dfield.config import FieldConfig
from dfield.field import distance_field
from dfield.compare import compare_with_oracle
from dfield.visualize import colorize_field, error_map


def load_config(config_path: str) -> dict:
    """Load settings from a YAML file."""
    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)
    return config or {}


def merge_configs(cli_args: argparse.Namespace, yaml_config: dict) -> dict:
    """Merge CLI arguments over YAML settings (CLI wins when given)."""
    config = {}
    if yaml_config:
        config.update(yaml_config)
    for key in ('image', 'out', 'threshold', 'scale', 'connectivity', 'channel', 'workers'):
        value = getattr(cli_args, key)
        if value is not None:
            config[key] = value
    for flag in ('preview', 'compare', 'verbose'):
        if getattr(cli_args, flag):
            config[flag] = True
    if 'workers' in config:
        config['num_workers'] = config.pop('workers')
    return config


def run(config: dict) -> int:
    img = cv2.imread(config['image'], cv2.IMREAD_UNCHANGED)
    if img is None:
        print(f"Error: cannot read {config['image']}")
        return 1
    try:
        fcfg = FieldConfig.from_dict(config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    out_path = config.get('out') or os.path.splitext(config['image'])[0] + '_df.png'
    try:
        field = distance_field(img, fcfg)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    if not cv2.imwrite(out_path, field):
        print(f"Error: cannot write {out_path}")
        return 1
    print(f"[OK] field saved → {out_path} ({field.shape[1]}x{field.shape[0]}, "
          f"{fcfg.connectivity}-connected, scale {fcfg.scale:g})")

    stem = os.path.splitext(out_path)[0]
    if config.get('preview'):
        prev = stem + '_preview.png'
        cv2.imwrite(prev, colorize_field(field))
        print(f"Preview → {prev}")
    if config.get('compare'):
        stats = compare_with_oracle(img, fcfg)
        err_path = stem + '_error.png'
        cv2.imwrite(err_path, error_map(stats['fast_cost'], stats['exact_cost'], fcfg.scale))
        print(f"[CMP] fast {stats['fast_ms']:.1f} ms, bruteforce {stats['bruteforce_ms']:.1f} ms")
        print(f"[CMP] max abs error {stats['max_abs_error']:.3f} px, "
              f"mean {stats['mean_abs_error']:.4f} px, max rel {stats['max_rel_error']:.3f}")
        print(f"[CMP] underestimates {stats['underestimates']}, "
              f"mismatched pixels {stats['mismatched_pixels']}")
        print(f"Error map → {err_path}")
    return 0


def main(args=None):
    parser = argparse.ArgumentParser(
        description='Build a uint8 distance-field texture from an image',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s --image glyph.png --out glyph_df.png
  %(prog)s --image icon.png --connectivity 8 --scale 4 --preview
  %(prog)s --config configs/field.yaml --image sprite.png --compare
        """
    )
    parser.add_argument('--image', type=str, help='input image path')
    parser.add_argument('--out', type=str, help='output PNG path (default: <image>_df.png)')
    parser.add_argument('--threshold', type=float, help='seed intensity cutoff (default: 128)')
    parser.add_argument('--scale', type=float, help='output units per pixel of distance (default: 8)')
    parser.add_argument('--connectivity', type=int, choices=[4, 8], help='neighbor topology (default: 4)')
    parser.add_argument('--channel', type=int, help='channel index to threshold (default: gray)')
    parser.add_argument('--workers', type=int, help='threads for seeding/extraction (default: inline)')
    parser.add_argument('--preview', action='store_true', help='also write a colorized preview')
    parser.add_argument('--compare', action='store_true', help='compare against the brute-force oracle')
    parser.add_argument('--verbose', action='store_true', help='print stage timings')
    parser.add_argument('--config', type=str, help='YAML config path')

    args = parser.parse_args(args)

    yaml_config = {}
    if args.config:
        if not os.path.exists(args.config):
            print(f"Error: config file not found: {args.config}")
            return 1
        yaml_config = load_config(args.config)

    config = merge_configs(args, yaml_config)
    if 'image' not in config:
        parser.error("--image is required (or set 'image' in the config file)")
    return run(config)


if __name__ == '__main__':
    sys.exit(main())
