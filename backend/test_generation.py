import pytest

from researchai.config import CONTENT_CHAR_LIMIT
from researchai.pipeline.generation import (
    CONTENT_CATALOG,
    InvalidContentType,
    run_content_generation,
)
from researchai.schemas import ContentType


@pytest.mark.parametrize(
    "content_type, system_phrase, user_phrase",
    [
        ("presentation", "expert presentation designer", "Create a 10-15 slide presentation"),
        ("podcast", "podcast script writer", "Create a 15-20 minute podcast script"),
        ("summary", "executive summary writer", "Create an executive summary"),
        ("visual", "data visualization expert", "Suggest visual representations"),
    ],
)
def test_each_content_type_uses_its_prompt(fake_llm, content_type, system_phrase, user_phrase):
    client = fake_llm("generated text")
    result = run_content_generation("paper body", content_type, client)

    system, user = client.calls[0]
    assert system_phrase in system["content"]
    assert user["content"].startswith(user_phrase)
    assert result.content_type == ContentType(content_type)
    assert result.generated_content == "generated text"


def test_analysis_result_is_embedded_as_json(fake_llm):
    client = fake_llm("ok")
    run_content_generation(
        "paper",
        "summary",
        client,
        analysis_result={"title": "Paper", "topics": ["AI"]},
    )
    user = client.calls[0][1]["content"]
    assert '{"title": "Paper", "topics": ["AI"]}' in user


def test_missing_analysis_result_is_serialized_as_null(fake_llm):
    client = fake_llm("ok")
    run_content_generation("paper", "podcast", client)
    assert "from this research: null" in client.calls[0][1]["content"]


def test_paper_content_is_truncated(fake_llm):
    client = fake_llm("ok")
    paper = "a" * CONTENT_CHAR_LIMIT + "TAIL"
    run_content_generation(paper, "visual", client)
    user = client.calls[0][1]["content"]
    assert "a" * CONTENT_CHAR_LIMIT in user
    assert "TAIL" not in user


def test_unknown_content_type_is_rejected_before_calling_model(fake_llm):
    client = fake_llm("ok")
    with pytest.raises(InvalidContentType):
        run_content_generation("paper", "haiku", client)
    assert client.calls == []


def test_result_serializes_with_camel_case_and_timestamp(fake_llm):
    result = run_content_generation("paper", "presentation", fake_llm("slides"))
    payload = result.to_dict()
    assert payload["contentType"] == "presentation"
    assert payload["generatedContent"] == "slides"
    assert "T" in payload["timestamp"]


def test_catalog_lists_all_content_types():
    assert [entry["id"] for entry in CONTENT_CATALOG] == [ct.value for ct in ContentType]
