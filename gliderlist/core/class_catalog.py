"""Class catalog and competition class definitions.

Defaults reproduce the DMSt handicap list and the two DAeC competition
classes. A JSON file can override any part:

    {
      "title": "DMSt Indexliste 2024",
      "year": "2024",
      "classes": [["Open", "Offene Klasse"], ["18", "18m Klasse"]],
      "competition_classes": [
        {"title": "15m Klasse", "reference": 114, "cutoff": 106, "flag": "15"}
      ],
      "change_policy": {"edition": "2024", "new_after_id": 611}
    }
"""

import json

from .models import ChangePolicy, ClassSpec, ReportConfig


# Declaration order is the section order of the handicap list
DEFAULT_CLASS_CATALOG = [
    ('Open', 'Offene Klasse'),
    ('18', '18m Klasse'),
    ('15', '15m Klasse'),
    ('Standard', 'Standardklasse'),
    ('Club', 'Clubklasse'),
    ('Double', 'Doppelsitzer'),
]

DEFAULT_COMPETITION_CLASSES = [
    ClassSpec(title='15m Klasse', reference=114.0, cutoff=106.0, flag='15'),
    ClassSpec(title='Standardklasse', reference=110.0, cutoff=102.0, flag='Std'),
]


def _parse_catalog(raw) -> list[tuple[str, str]]:
    if not isinstance(raw, list):
        raise ValueError("'classes' must be a list of [flag, label] pairs")
    catalog = []
    for i, item in enumerate(raw):
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError(f"'classes[{i}]' must be a [flag, label] pair, got {item!r}")
        flag, label = item
        catalog.append((str(flag), str(label)))
    return catalog


def _parse_class_spec(raw, index: int) -> ClassSpec:
    if not isinstance(raw, dict):
        raise ValueError(f"'competition_classes[{index}]' must be an object")
    missing = [k for k in ('title', 'reference', 'cutoff', 'flag') if k not in raw]
    if missing:
        raise ValueError(
            f"'competition_classes[{index}]' is missing {', '.join(missing)}")
    try:
        reference = float(raw['reference'])
        cutoff = float(raw['cutoff'])
    except (TypeError, ValueError):
        raise ValueError(
            f"'competition_classes[{index}]': reference and cutoff must be numbers")
    return ClassSpec(title=str(raw['title']), reference=reference,
                     cutoff=cutoff, flag=str(raw['flag']))


def _parse_change_policy(raw) -> ChangePolicy:
    if not isinstance(raw, dict):
        raise ValueError("'change_policy' must be an object")
    new_after_id = raw.get('new_after_id')
    if new_after_id is not None:
        try:
            new_after_id = int(new_after_id)
        except (TypeError, ValueError):
            raise ValueError(
                f"'change_policy.new_after_id' must be an integer, got {new_after_id!r}")
    return ChangePolicy(edition=str(raw.get('edition', '')),
                        new_after_id=new_after_id)


def load_report_config(config_path: str | None = None, **overrides) -> ReportConfig:
    """Build a ReportConfig from defaults, an optional JSON file and overrides.

    Keyword overrides that are None are ignored, so CLI arguments can be
    passed straight through.
    """
    data = {}
    if config_path:
        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a JSON object")

    config = ReportConfig(
        title=str(data.get('title', '')),
        year=str(data.get('year', '')),
        class_catalog=(_parse_catalog(data['classes']) if 'classes' in data
                       else list(DEFAULT_CLASS_CATALOG)),
        competition_classes=(
            [_parse_class_spec(c, i) for i, c in enumerate(data['competition_classes'])]
            if 'competition_classes' in data else list(DEFAULT_COMPETITION_CLASSES)),
        change_policy=(_parse_change_policy(data['change_policy'])
                       if 'change_policy' in data else ChangePolicy()),
    )

    for key, value in overrides.items():
        if value is None:
            continue
        if not hasattr(config, key):
            raise ValueError(f"Unknown config override: {key}")
        setattr(config, key, value)

    return config


def competition_flags(specs) -> list[str]:
    """Class flags used by ``specs``, first occurrence first."""
    flags = []
    for spec in specs:
        if spec.flag not in flags:
            flags.append(spec.flag)
    return flags
