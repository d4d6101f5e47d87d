from app.services.answer.models import Effort, SchemeCard, SourceCard
from app.services.answer.schemes import add_to_shortlist, extract_schemes

SOURCES = [
    SourceCard(title="PM Kisan", url="https://pmkisan.gov.in"),
    SourceCard(title="Scholarships", url="https://scholarships.gov.in"),
]


def test_extract_schemes_strips_bold_and_assigns_sources() -> None:
    text = "Options:\n1. **PM Kisan Samman Nidhi**\n2. Post Matric Scholarship\n3. Ujjwala Yojana"
    schemes = extract_schemes(text, SOURCES)
    assert [s.name for s in schemes] == [
        "PM Kisan Samman Nidhi",
        "Post Matric Scholarship",
        "Ujjwala Yojana",
    ]
    assert schemes[0].source_url == "https://pmkisan.gov.in"
    assert schemes[1].source_url == "https://scholarships.gov.in"
    # more schemes than sources falls back to the first source
    assert schemes[2].source_url == "https://pmkisan.gov.in"


def test_extract_schemes_defaults() -> None:
    schemes = extract_schemes("1. Some Scheme Name", [])
    assert schemes == [SchemeCard(name="Some Scheme Name")]
    assert schemes[0].benefit == "Check source details"
    assert schemes[0].deadline == "Not specified"
    assert schemes[0].effort == Effort.MEDIUM
    assert schemes[0].source_url is None


def test_short_names_are_skipped_and_do_not_consume_sources() -> None:
    schemes = extract_schemes("1. OK\n2. Valid scheme", SOURCES)
    assert [s.name for s in schemes] == ["Valid scheme"]
    assert schemes[0].source_url == "https://pmkisan.gov.in"


def test_indented_or_unspaced_items_are_ignored() -> None:
    assert extract_schemes("  1. Indented scheme\n1.NoSpace scheme", SOURCES) == []


def test_extract_schemes_capped_at_six() -> None:
    text = "\n".join(f"{i}. Scheme number {i}" for i in range(1, 11))
    schemes = extract_schemes(text, SOURCES)
    assert len(schemes) == 6
    assert schemes[-1].name == "Scheme number 6"


def test_add_to_shortlist_ignores_case_duplicates() -> None:
    first = add_to_shortlist([], SchemeCard(name="PM Kisan Yojana"))
    second = add_to_shortlist(first, SchemeCard(name="pm kisan yojana"))
    assert [s.name for s in second] == ["PM Kisan Yojana"]
    third = add_to_shortlist(second, SchemeCard(name="Ujjwala Yojana"))
    assert len(third) == 2
    assert len(first) == 1
