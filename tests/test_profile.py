from app.services.answer.models import MatchStatus, ProfileAttributes, ProfileField
from app.services.answer.profile import (
    extract_profile,
    field_chip_label,
    field_status,
    missing_fields,
)


def test_extract_profile_from_template() -> None:
    text = "State: Bihar\nAge: 24\nCategory: OBC\nFamily income: 150000"
    profile = extract_profile(text)
    assert profile.as_dict() == {
        "state": "Bihar",
        "age": "24",
        "category": "OBC",
        "income": "150000",
    }


def test_labeled_age_wins_over_years_old() -> None:
    profile = extract_profile("I am 35 years old, age: 40")
    assert profile.age == "40"


def test_age_falls_back_to_years_old() -> None:
    assert extract_profile("my son is 12 yrs old").age == "12"


def test_age_out_of_range_is_accepted() -> None:
    assert extract_profile("Age: 99").age == "99"


def test_category_literal_before_labeled() -> None:
    profile = extract_profile("Category: backward class, actually EWS")
    assert profile.category == "EWS"


def test_category_labeled_fallback() -> None:
    profile = extract_profile("category: backward class")
    assert profile.category == "backward class"


def test_income_currency_fallback() -> None:
    profile = extract_profile("We earn about ₹2,50,000 a year")
    assert profile.income == "₹2,50,000"


def test_income_labeled_stops_at_comma() -> None:
    profile = extract_profile("income: 3 lakh, farmer")
    assert profile.income == "3 lakh"


def test_state_contextual_fallback_is_trimmed() -> None:
    profile = extract_profile("I live in Uttar Pradesh ")
    assert profile.state == "Uttar Pradesh"


def test_no_match_leaves_fields_absent() -> None:
    profile = extract_profile("hello")
    assert profile == ProfileAttributes()
    assert profile.as_dict() == {}


def test_empty_text() -> None:
    assert extract_profile("").as_dict() == {}


def test_field_status_and_missing() -> None:
    status = field_status(ProfileAttributes(state="Bihar", age="24"))
    assert status[ProfileField.STATE] == MatchStatus.MATCH
    assert status[ProfileField.AGE] == MatchStatus.MATCH
    assert status[ProfileField.CATEGORY] == MatchStatus.MISSING
    assert missing_fields(status) == [ProfileField.CATEGORY, ProfileField.INCOME]


def test_field_status_treats_empty_string_as_missing() -> None:
    status = field_status(ProfileAttributes(income=""))
    assert status[ProfileField.INCOME] == MatchStatus.MISSING


def test_field_chip_label() -> None:
    assert field_chip_label(ProfileField.STATE, MatchStatus.MATCH) == "State: Provided"
    assert field_chip_label(ProfileField.AGE, MatchStatus.MISSING) == "Age: Missing"
