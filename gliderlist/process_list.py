#!/usr/bin/env python3
"""CLI entry point for generating glider handicap lists.

Usage:
    python process_list.py --report dmst --data gliderlist.csv \\
        --title "DMSt Indexliste 2023" --new-after-id 593 --output ./output/

    python process_list.py --report competition --data competition.csv \\
        --title "DAeC Wettbewerbsindex" --output ./output/
"""

import argparse
import datetime
import os
import sys
from dataclasses import replace

# Add parent directory to path for imports (skip when frozen by PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gliderlist.core.class_catalog import competition_flags, load_report_config
from gliderlist.core.change_detector import apply_policy, count_changed
from gliderlist.core.grouper import group
from gliderlist.core.classifier import classify_all
from gliderlist.core.output_generator import (
    generate_handicap_markdown, generate_competition_csv
)
from gliderlist.core.pdf_generator import generate_handicap_pdf, generate_competition_pdf
from gliderlist.adapters.dmst_adapter import DmstAdapter
from gliderlist.adapters.competition_adapter import CompetitionAdapter


def run_dmst(config, data_path: str, output_dir: str, logo_path: str | None):
    print(f"Parsing {data_path}...")
    rows = DmstAdapter().parse(data_path)
    print(f"Parsed {len(rows)} glider types")

    policy = config.change_policy
    models = apply_policy(rows, policy)
    threshold = policy.new_after_id if policy.new_after_id is not None else 'none'
    print(f"Change policy {policy.edition or '(unnamed)'}: new after id {threshold}, "
          f"{count_changed(models)} highlighted")

    sections = group(models, config.class_catalog)
    for section in sections:
        total = sum(len(b.entries) for b in section.buckets)
        print(f"  {section.label}: {total} types in {len(section.buckets)} handicaps")

    md_path = os.path.join(output_dir, 'dmst.md')
    generate_handicap_markdown(sections, md_path, title=config.title)
    print(f"Generated {md_path}")

    pdf_path = os.path.join(output_dir, 'dmst.pdf')
    generate_handicap_pdf(sections, pdf_path, title=config.title, logo_path=logo_path)
    print(f"Generated {pdf_path}")


def run_competition(config, data_path: str, output_dir: str, logo_path: str | None):
    print(f"Parsing {data_path}...")
    flags = competition_flags(config.competition_classes)
    models = CompetitionAdapter(flag_columns=flags).parse(data_path)
    print(f"Parsed {len(models)} glider types")

    classes = classify_all(models, config.competition_classes)
    for cls in classes:
        print(f"  {cls.title}: {len(cls.entries)} eligible "
              f"(cutoff {cls.cutoff}, reference {cls.reference})")

    csv_path = os.path.join(output_dir, 'competition.csv')
    generate_competition_csv(classes, csv_path)
    print(f"Generated {csv_path}")

    pdf_path = os.path.join(output_dir, 'competition.pdf')
    generate_competition_pdf(classes, pdf_path, title=config.title,
                             roster=models, logo_path=logo_path,
                             flag_columns=flags)
    print(f"Generated {pdf_path}")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Generate glider handicap lists')
    parser.add_argument('--report', required=True, choices=['dmst', 'competition'],
                        help='Report type')
    parser.add_argument('--data', required=True, help='Input CSV file')
    parser.add_argument('--output', required=True, help='Output directory for generated files')
    parser.add_argument('--config', default=None,
                        help='JSON file with classes, competition classes and change policy')
    parser.add_argument('--title', default=None, help='Document title')
    parser.add_argument('--year', default=None,
                        help='Edition year used in the default title (default: current year)')
    parser.add_argument('--new-after-id', type=int, default=None,
                        help='Last id of the prior edition; later ids are highlighted as new')
    parser.add_argument('--edition', default=None, help='Label of the change policy edition')
    parser.add_argument('--logo', default=None, help='PNG/JPEG logo for the page header')

    args = parser.parse_args(argv)

    config = load_report_config(args.config, title=args.title, year=args.year)
    if not config.year:
        config.year = str(datetime.datetime.now().year)
    if not config.title:
        if args.report == 'dmst':
            config.title = f'DMSt Indexliste {config.year}'
        else:
            config.title = f'Wettbewerbsindex {config.year}'
    if args.new_after_id is not None:
        config.change_policy = replace(config.change_policy, new_after_id=args.new_after_id)
    if args.edition is not None:
        config.change_policy = replace(config.change_policy, edition=args.edition)

    os.makedirs(args.output, exist_ok=True)

    if args.report == 'dmst':
        run_dmst(config, args.data, args.output, args.logo)
    else:
        run_competition(config, args.data, args.output, args.logo)

    print("\nDone!")


if __name__ == '__main__':
    main()
