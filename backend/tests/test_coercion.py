import pytest

from app.analysis.coercion import (
    ACCESSIBLE_HTML_PLACEHOLDER,
    FIELD_DEFAULTS,
    ORIGINAL_TEXT_PLACEHOLDER,
    coerce_analysis,
    fallback_analysis,
)


def test_empty_payload_gets_every_default():
    a = coerce_analysis({})
    assert a.original_text == ORIGINAL_TEXT_PLACEHOLDER
    assert a.accessible_html == ACCESSIBLE_HTML_PLACEHOLDER
    assert a.issues == []
    assert a.fixes == []
    assert a.before_score == FIELD_DEFAULTS["beforeScore"] == 25
    assert a.after_score == FIELD_DEFAULTS["afterScore"] == 95


def test_none_and_non_mapping_payloads_are_treated_as_empty():
    assert coerce_analysis(None) == coerce_analysis({})
    assert coerce_analysis(["not", "a", "dict"]) == coerce_analysis({})


@pytest.mark.parametrize("missing", ["issues", "fixes", "beforeScore", "afterScore", "accessibleHtml", "originalText"])
def test_each_missing_field_is_defaulted(missing):
    full = {
        "originalText": "text",
        "accessibleHtml": "<p>ok</p>",
        "issues": [{"type": "Contrast", "severity": "low", "description": "grey on grey"}],
        "fixes": [{"type": "Contrast", "description": "darkened text"}],
        "beforeScore": 40,
        "afterScore": 90,
    }
    del full[missing]
    dumped = coerce_analysis(full).model_dump(by_alias=True)
    assert dumped[missing] is not None
    if missing in ("issues", "fixes"):
        assert dumped[missing] == []
    else:
        assert dumped[missing] == FIELD_DEFAULTS[missing]


def test_original_text_default_can_be_overridden():
    a = coerce_analysis({"originalText": None}, original_text_default="the document")
    assert a.original_text == "the document"


def test_zero_scores_are_kept():
    a = coerce_analysis({"beforeScore": 0, "afterScore": 0})
    assert (a.before_score, a.after_score) == (0, 0)


@pytest.mark.parametrize(
    "value, expected",
    [
        (42, 42), (42.6, 43), ("73", 73), (-5, 0), (150, 100), ("high", 25), (True, 25), (float("nan"), 25),
        (10**400, 100), (-(10**400), 0), ("1" + "0" * 400, 100), (float("inf"), 100),
    ],
)
def test_score_coercion(value, expected):
    assert coerce_analysis({"beforeScore": value}).before_score == expected


def test_after_score_lower_than_before_is_not_corrected():
    a = coerce_analysis({"beforeScore": 80, "afterScore": 30})
    assert (a.before_score, a.after_score) == (80, 30)


def test_issue_items_are_normalized():
    a = coerce_analysis(
        {
            "issues": [
                {"type": "Headings", "severity": "HIGH", "description": "No h1", "location": "Page 1"},
                {"type": "Tables", "severity": "critical", "description": "No headers", "location": ""},
                {"severity": "low"},
                "not an object",
                None,
            ]
        }
    )
    assert [(i.type, i.severity) for i in a.issues] == [("Headings", "high"), ("Tables", "medium"), ("Unknown", "low")]
    assert a.issues[0].location == "Page 1"
    assert a.issues[1].location is None
    assert a.issues[2].description == ""


def test_fixes_that_are_not_a_list_default_to_empty():
    assert coerce_analysis({"fixes": "added alt text"}).fixes == []


def test_wire_names_are_camel_case():
    dumped = coerce_analysis({}).model_dump(by_alias=True)
    assert set(dumped) == {"originalText", "accessibleHtml", "issues", "fixes", "beforeScore", "afterScore"}


def test_fallback_analysis_shape():
    a = fallback_analysis()
    assert (a.before_score, a.after_score) == (0, 0)
    assert len(a.issues) == 1
    assert a.issues[0].type == "Analysis Error"
    assert a.issues[0].severity == "high"
    assert a.fixes == []
    assert "<article>" in a.accessible_html
