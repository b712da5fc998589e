"""PDF generator for the handicap and competition lists.

Generates A4 documents with:
- Centered title and optional logo in the page header
- One heading per class, in catalog order
- Handicap list: names of each handicap bucket flowing left, separated by
  bars, changed types in red, handicap right-aligned
- Competition list: cutoff and reference line, then model / rescaled
  handicap rows
- Optional roster overview with class marks
- Automatic page breaks and page numbers
"""

import fitz  # PyMuPDF

from .output_generator import format_handicap, format_raw_handicap

# --- Page layout constants (A4: 595 x 842 pt) ---
PAGE_W = 595
PAGE_H = 842
LEFT_MARGIN = 50
RIGHT_MARGIN = PAGE_W - 50
HANDICAP_COL_W = 50
NAMES_RIGHT = RIGHT_MARGIN - HANDICAP_COL_W - 10

TITLE_Y = 60
LOGO_SIZE = 40
CONTENT_TOP = 100
CONTENT_BOTTOM = PAGE_H - 50
PAGE_NUMBER_Y = PAGE_H - 25

# Font sizes
TITLE_SIZE = 18
HEADING_SIZE = 13
SUBHEADING_SIZE = 9
BODY_SIZE = 9
FOOTER_SIZE = 7

LINE_HEIGHT_RATIO = 1.5
SECTION_GAP = 14

FONT_REGULAR = 'Helvetica'
FONT_BOLD = 'Helvetica-Bold'

# Colors
BLACK = (0, 0, 0)
RED = (0.8, 0, 0)
GRAY = (0.5, 0.5, 0.5)
LIGHT_GRAY = (0.85, 0.85, 0.85)

SEPARATOR = ' | '
NO_ENTRIES = 'Keine Einträge'

OVERVIEW_INDEX_X = 300
OVERVIEW_FLAGS_X = 360
OVERVIEW_FLAG_STEP = 40


def generate_handicap_pdf(sections, output_path: str, title: str = '',
                          logo_path: str | None = None):
    """Generate the grouped handicap list PDF.

    Args:
        sections: ClassSection list from grouper.group().
        output_path: Where to save the PDF.
        title: Title printed on every page.
        logo_path: Optional PNG/JPEG placed left of the title.
    """
    doc = fitz.open()
    page = _new_page(doc, title, logo_path)
    y = CONTENT_TOP
    line_height = BODY_SIZE * LINE_HEIGHT_RATIO

    for section in sections:
        page, y = _ensure_space(doc, page, y, SECTION_GAP + HEADING_SIZE + line_height,
                                title, logo_path)
        y = _draw_heading(page, y, section.label)

        if not section.buckets:
            _draw_note(page, y, NO_ENTRIES)
            y += line_height
            continue

        for bucket in section.buckets:
            lines = _wrap_names(bucket.entries, BODY_SIZE)
            page, y = _ensure_space(doc, page, y, len(lines) * line_height,
                                    title, logo_path)
            _draw_right(page, RIGHT_MARGIN, y, format_raw_handicap(bucket.handicap),
                        FONT_BOLD, BODY_SIZE)
            for line in lines:
                _draw_name_line(page, y, line, BODY_SIZE)
                y += line_height
            page.draw_line(fitz.Point(LEFT_MARGIN, y - line_height + 3),
                           fitz.Point(RIGHT_MARGIN, y - line_height + 3),
                           color=LIGHT_GRAY, width=0.5)

    _draw_page_numbers(doc)
    doc.save(output_path)
    doc.close()


def generate_competition_pdf(classes, output_path: str, title: str = '',
                             roster=None, logo_path: str | None = None,
                             flag_columns=None):
    """Generate the competition list PDF.

    Args:
        classes: CompetitionClass list from classifier.classify_all().
        output_path: Where to save the PDF.
        title: Title printed on every page.
        roster: Optional full Model list; adds an overview of all types.
        logo_path: Optional PNG/JPEG placed left of the title.
        flag_columns: Class flags shown in the overview. Defaults to every
            flag found in the roster, sorted.
    """
    doc = fitz.open()
    page = _new_page(doc, title, logo_path)
    y = CONTENT_TOP
    line_height = BODY_SIZE * LINE_HEIGHT_RATIO

    for cls in classes:
        page, y = _ensure_space(doc, page, y,
                                SECTION_GAP + HEADING_SIZE + 2 * line_height,
                                title, logo_path)
        y = _draw_heading(page, y, cls.title)
        _draw_note(page, y, f'Referenzindex {format_raw_handicap(cls.reference)}, '
                            f'Mindestindex {format_raw_handicap(cls.cutoff)}')
        y += line_height

        if not cls.entries:
            _draw_note(page, y, NO_ENTRIES)
            y += line_height
            continue

        for entry in cls.entries:
            page, y = _ensure_space(doc, page, y, line_height, title, logo_path)
            page.insert_text(fitz.Point(LEFT_MARGIN, y), entry.name,
                             fontname=FONT_REGULAR, fontsize=BODY_SIZE, color=BLACK)
            _draw_right(page, RIGHT_MARGIN, y, format_handicap(entry.handicap),
                        FONT_REGULAR, BODY_SIZE)
            y += line_height

    if roster:
        page = _new_page(doc, title, logo_path)
        if flag_columns is None:
            flag_columns = sorted(set().union(*(m.class_flags for m in roster)))
        _draw_roster_overview(doc, page, roster, flag_columns, title, logo_path)

    _draw_page_numbers(doc)
    doc.save(output_path)
    doc.close()


# --- Page helpers ---

def _new_page(doc, title, logo_path):
    page = doc.new_page(width=PAGE_W, height=PAGE_H)
    if title:
        tw = fitz.get_text_length(title, fontname=FONT_BOLD, fontsize=TITLE_SIZE)
        page.insert_text(fitz.Point(PAGE_W / 2 - tw / 2, TITLE_Y), title,
                         fontname=FONT_BOLD, fontsize=TITLE_SIZE, color=BLACK)
    if logo_path:
        rect = fitz.Rect(LEFT_MARGIN, TITLE_Y - LOGO_SIZE + 8,
                         LEFT_MARGIN + LOGO_SIZE, TITLE_Y + 8)
        page.insert_image(rect, filename=logo_path, keep_proportion=True)
    page.draw_line(fitz.Point(LEFT_MARGIN, TITLE_Y + 16),
                   fitz.Point(RIGHT_MARGIN, TITLE_Y + 16),
                   color=BLACK, width=0.75)
    return page


def _ensure_space(doc, page, y, needed, title, logo_path):
    """Start a new page when ``needed`` points do not fit below ``y``."""
    if y + needed > CONTENT_BOTTOM:
        return _new_page(doc, title, logo_path), CONTENT_TOP
    return page, y


def _draw_page_numbers(doc):
    total = doc.page_count
    for i, page in enumerate(doc):
        text = f'Seite {i + 1} von {total}'
        tw = fitz.get_text_length(text, fontname=FONT_REGULAR, fontsize=FOOTER_SIZE)
        page.insert_text(fitz.Point(PAGE_W / 2 - tw / 2, PAGE_NUMBER_Y), text,
                         fontname=FONT_REGULAR, fontsize=FOOTER_SIZE, color=GRAY)


# --- Layout helpers ---

def _wrap_names(entries, font_size):
    """Split bucket entries into lines that fit the names column.

    Returns a list of lines, each a list of Model entries.
    """
    available = NAMES_RIGHT - LEFT_MARGIN
    sep_w = fitz.get_text_length(SEPARATOR, fontname=FONT_REGULAR, fontsize=font_size)
    lines = []
    current = []
    width = 0
    for entry in entries:
        w = _name_width(entry, font_size)
        extra = w if not current else sep_w + w
        if current and width + extra > available:
            lines.append(current)
            current = [entry]
            width = w
        else:
            current.append(entry)
            width += extra
    if current:
        lines.append(current)
    return lines


def _name_width(entry, font_size):
    font = FONT_BOLD if entry.highlight else FONT_REGULAR
    return fitz.get_text_length(entry.name, fontname=font, fontsize=font_size)


# --- Drawing functions ---

def _draw_heading(page, y, text):
    """Draw a class heading and return the y position for the first row."""
    y += SECTION_GAP
    page.insert_text(fitz.Point(LEFT_MARGIN, y), text,
                     fontname=FONT_BOLD, fontsize=HEADING_SIZE, color=BLACK)
    return y + HEADING_SIZE * 1.2


def _draw_note(page, y, text):
    page.insert_text(fitz.Point(LEFT_MARGIN, y), text,
                     fontname=FONT_REGULAR, fontsize=SUBHEADING_SIZE, color=GRAY)


def _draw_right(page, right_x, y, text, fontname, font_size):
    tw = fitz.get_text_length(text, fontname=fontname, fontsize=font_size)
    page.insert_text(fitz.Point(right_x - tw, y), text,
                     fontname=fontname, fontsize=font_size, color=BLACK)


def _draw_name_line(page, y, entries, font_size):
    """Draw one line of names; changed types in bold red."""
    x = LEFT_MARGIN
    for i, entry in enumerate(entries):
        if i > 0:
            page.insert_text(fitz.Point(x, y), SEPARATOR,
                             fontname=FONT_REGULAR, fontsize=font_size, color=GRAY)
            x += fitz.get_text_length(SEPARATOR, fontname=FONT_REGULAR,
                                      fontsize=font_size)
        font = FONT_BOLD if entry.highlight else FONT_REGULAR
        color = RED if entry.highlight else BLACK
        page.insert_text(fitz.Point(x, y), entry.name,
                         fontname=font, fontsize=font_size, color=color)
        x += fitz.get_text_length(entry.name, fontname=font, fontsize=font_size)


def _draw_roster_overview(doc, page, roster, flag_columns, title, logo_path):
    """Table of every roster model with its raw handicap and class marks."""
    line_height = BODY_SIZE * LINE_HEIGHT_RATIO
    y = _draw_heading(page, CONTENT_TOP, 'Alle Flugzeugtypen')
    y = _draw_overview_header(page, y, flag_columns)

    for model in roster:
        if y + line_height > CONTENT_BOTTOM:
            page = _new_page(doc, title, logo_path)
            y = _draw_overview_header(page, CONTENT_TOP + SECTION_GAP, flag_columns)
        page.insert_text(fitz.Point(LEFT_MARGIN, y), model.name,
                         fontname=FONT_REGULAR, fontsize=BODY_SIZE, color=BLACK)
        page.insert_text(fitz.Point(OVERVIEW_INDEX_X, y),
                         format_raw_handicap(model.handicap),
                         fontname=FONT_REGULAR, fontsize=BODY_SIZE, color=BLACK)
        for col, flag in enumerate(flag_columns):
            if flag in model.class_flags:
                page.insert_text(fitz.Point(_flag_x(col), y), 'x',
                                 fontname=FONT_REGULAR, fontsize=BODY_SIZE,
                                 color=BLACK)
        y += line_height


def _flag_x(col):
    return OVERVIEW_FLAGS_X + col * OVERVIEW_FLAG_STEP


def _draw_overview_header(page, y, flag_columns):
    xs = [LEFT_MARGIN, OVERVIEW_INDEX_X] + [_flag_x(i) for i in range(len(flag_columns))]
    headers = ['Typ', 'Index'] + list(flag_columns)
    for x, text in zip(xs, headers):
        page.insert_text(fitz.Point(x, y), text,
                         fontname=FONT_BOLD, fontsize=BODY_SIZE, color=BLACK)
    page.draw_line(fitz.Point(LEFT_MARGIN, y + 3), fitz.Point(RIGHT_MARGIN, y + 3),
                   color=GRAY, width=0.5)
    return y + BODY_SIZE * LINE_HEIGHT_RATIO
