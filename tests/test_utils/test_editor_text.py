# tests/test_utils/test_editor_text.py
import pytest
from books.errors import ParseError
from books.models.book import AddBookModel
from books.utils.editor_text import parse_editable, render_editable

EDITED = (
    "Author(s): Reeve, Simon\n"
    "Publisher: Carlton Publishing Group\n"
    "Title: The New Jackals: Osama Bin Laden and the Future of Terrorism\n"
    "Edition: 2nd\n"
    "Date Published: 2001\n"
    "Original Date Published: 1999\n"
    "Price: 20.0\n"
    "Binding: Paperback\n"
    "ISBN: 9780233050485\n"
    "Pages: 352\n"
    "Owned: true"
)

def without_line(text: str, label: str) -> str:
    return "\n".join(line for line in text.split("\n") if not line.startswith(f"{label}:"))

def replace_line(text: str, label: str, replacement: str) -> str:
    return "\n".join(
        replacement if line.startswith(f"{label}:") else line
        for line in text.split("\n")
    )

def test_render_editable(single_author_model):
    """Test rendering the model as eleven labelled lines in a fixed order"""
    rendered = render_editable(single_author_model, newline="\n")
    assert rendered == EDITED

def test_render_editable_keeps_empty_optional_fields(multiple_authors_model):
    model = multiple_authors_model.model_copy(update={'price': None})
    lines = render_editable(model, newline="\n").split("\n")

    assert len(lines) == 11
    assert "Original Date Published: " in lines
    assert "Price: " in lines

def test_render_editable_windows_newlines(single_author_model):
    rendered = render_editable(single_author_model, newline="\r\n")
    assert rendered.count("\r\n") == 10

def test_parse_editable():
    model = parse_editable(EDITED)

    assert model.authors == "Reeve, Simon"
    assert model.publisher == "Carlton Publishing Group"
    assert model.title == "The New Jackals: Osama Bin Laden and the Future of Terrorism"
    assert model.edition == "2nd"
    assert model.date_published == "2001"
    assert model.original_date_published == "1999"
    assert model.price == 20.0
    assert model.binding == "Paperback"
    assert model.isbn == "9780233050485"
    assert model.pages == 352
    assert model.owned is True

def test_parse_editable_crlf():
    model = parse_editable(EDITED.replace("\n", "\r\n") + "\r\n")
    assert model.isbn == "9780233050485"
    assert model.owned is True

def test_parse_editable_is_order_independent():
    lines = EDITED.split("\n")
    model = parse_editable("\n".join(reversed(lines)))
    assert model == parse_editable(EDITED)

def test_parse_editable_optional_fields_missing():
    text = without_line(without_line(EDITED, "Original Date Published"), "Price")
    model = parse_editable(text)
    assert model.original_date_published is None
    assert model.price is None

def test_parse_editable_optional_fields_empty():
    text = replace_line(EDITED, "Original Date Published", "Original Date Published:")
    text = replace_line(text, "Price", "Price: ")
    model = parse_editable(text)
    assert model.original_date_published is None
    assert model.price is None

def test_parse_editable_missing_isbn():
    with pytest.raises(ParseError) as exc_info:
        parse_editable(without_line(EDITED, "ISBN"))
    assert exc_info.value.field == "isbn"

@pytest.mark.parametrize("label, field", [
    ("Author(s)", "authors"),
    ("Publisher", "publisher"),
    ("Title", "title"),
    ("Edition", "edition"),
    ("Date Published", "date_published"),
    ("Binding", "binding"),
    ("Pages", "pages"),
    ("Owned", "owned"),
])
def test_parse_editable_missing_required_field(label, field):
    with pytest.raises(ParseError) as exc_info:
        parse_editable(without_line(EDITED, label))
    assert exc_info.value.field == field

def test_parse_editable_invalid_price():
    with pytest.raises(ParseError) as exc_info:
        parse_editable(replace_line(EDITED, "Price", "Price: notanumber"))
    assert exc_info.value.field == "price"

@pytest.mark.parametrize("value", ["nan", "inf", "-inf", "NaN", "Infinity"])
def test_parse_editable_non_finite_price(value):
    with pytest.raises(ParseError) as exc_info:
        parse_editable(replace_line(EDITED, "Price", f"Price: {value}"))
    assert exc_info.value.field == "price"

@pytest.mark.parametrize("value", ["many", "-3", "35.5"])
def test_parse_editable_invalid_pages(value):
    with pytest.raises(ParseError) as exc_info:
        parse_editable(replace_line(EDITED, "Pages", f"Pages: {value}"))
    assert exc_info.value.field == "pages"

def test_parse_editable_invalid_owned():
    with pytest.raises(ParseError) as exc_info:
        parse_editable(replace_line(EDITED, "Owned", "Owned: yes"))
    assert exc_info.value.field == "owned"

def test_parse_editable_unknown_key():
    """A mistyped label is rejected instead of being skipped"""
    with pytest.raises(ParseError) as exc_info:
        parse_editable(replace_line(EDITED, "Binding", "Bindng: Paperback"))
    assert exc_info.value.field == "Bindng"

def test_parse_editable_duplicate_key():
    with pytest.raises(ParseError) as exc_info:
        parse_editable(EDITED + "\nISBN: 999")
    assert exc_info.value.field == "isbn"

def test_parse_editable_title_with_colon(multiple_authors_model):
    model = parse_editable(render_editable(multiple_authors_model))
    assert model.title == multiple_authors_model.title

def test_round_trip(single_author_record, multiple_authors_record):
    for record in (single_author_record, multiple_authors_record):
        model = AddBookModel.from_isbndb_book(record)
        assert parse_editable(render_editable(model)) == model

@pytest.mark.parametrize("separator", ["\x85", "\u2028", "\x0c", "\x1e"])
def test_round_trip_title_with_unicode_separator(single_author_record, separator):
    """Only \\n and \\r\\n end a line, so other separators stay in the value"""
    record = single_author_record.model_copy(update={'title_long': f"The New{separator}Jackals"})
    model = AddBookModel.from_isbndb_book(record)

    parsed = parse_editable(render_editable(model))

    assert parsed.title == f"The New{separator}Jackals"
    assert parsed == model
