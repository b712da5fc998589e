"""Text outputs for the handicap and competition lists.

Generates:
  - Handicap list markdown (one section per class, one line per handicap)
  - Competition CSV (one row per eligible model with rescaled handicap)
"""

import csv


NAME_SEPARATOR = ' | '


def format_handicap(value) -> str:
    """Format a rescaled handicap with three decimals: 0.947368 -> '0.947'."""
    return f'{value:.3f}'


def format_raw_handicap(value) -> str:
    """Format a raw handicap without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def bucket_line(bucket) -> str:
    """Render one bucket: names joined by ' | ', changed names in bold."""
    names = [f'**{m.name}**' if m.highlight else m.name for m in bucket.entries]
    return f'{NAME_SEPARATOR.join(names)} - {format_raw_handicap(bucket.handicap)}'


def generate_handicap_markdown(sections, output_path: str, title: str = ''):
    """Write the grouped handicap list as markdown.

    Args:
        sections: ClassSection list from grouper.group().
        output_path: Where to write the markdown.
        title: Optional document title.
    """
    lines = []
    if title:
        lines.append(f'# {title}\n')

    for section in sections:
        lines.append(f'\n## {section.label}\n')
        if not section.buckets:
            lines.append('_Keine Einträge_')
            lines.append('')
            continue
        for bucket in section.buckets:
            lines.append(bucket_line(bucket))
        lines.append('')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write('\n'.join(lines))


def generate_competition_csv(classes, output_path: str):
    """Write all competition classes into one CSV.

    Columns: class, model, handicap (rescaled, 3 decimals), cutoff, reference.
    Entries keep roster order within each class.
    """
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=['class', 'model', 'handicap',
                                               'cutoff', 'reference'])
        writer.writeheader()
        for cls in classes:
            for entry in cls.entries:
                writer.writerow({
                    'class': cls.title,
                    'model': entry.name,
                    'handicap': format_handicap(entry.handicap),
                    'cutoff': format_raw_handicap(cls.cutoff),
                    'reference': format_raw_handicap(cls.reference),
                })
