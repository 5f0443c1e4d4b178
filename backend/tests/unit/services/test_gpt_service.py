"""
Unit tests for GPTService
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.core.exceptions import DiscoveryError
from app.services.gpt_service import (
    FragmentList,
    GPTService,
    PlainText,
    build_competitor_prompt,
    resolve_completion_content,
    split_suggestions,
)
from tests.utils.fakes import make_completion


def test_prompt_with_known_competitors_requests_three_domains() -> None:
    prompt = build_competitor_prompt("x.com", ["a.com", "b.com"])

    assert "suggest 3 similar" in prompt
    assert "5" not in prompt
    assert "a.com, b.com" in prompt
    assert "x.com" in prompt


def test_prompt_without_known_competitors_requests_five_domains() -> None:
    prompt = build_competitor_prompt("x.com", [])

    assert "Suggest 5 potential" in prompt
    assert "market trends" in prompt


def test_resolve_plain_string_content() -> None:
    content = resolve_completion_content("a.com, b.com")

    assert isinstance(content, PlainText)
    assert content.as_text() == "a.com, b.com"


def test_resolve_fragment_list_content() -> None:
    content = resolve_completion_content(
        [{"type": "text", "text": "a.com, b.com"}, SimpleNamespace(text="c.com")]
    )

    assert isinstance(content, FragmentList)
    assert content.as_text() == "a.com, b.com, c.com"


def test_resolve_empty_content() -> None:
    assert resolve_completion_content(None).as_text() == ""


def test_split_suggestions_trims_lowercases_and_drops_empty() -> None:
    assert split_suggestions(" A.com ,b.COM,, ,c.io\n") == ["a.com", "b.com", "c.io"]


@pytest.mark.asyncio
async def test_suggest_competitor_domains_with_gpt(gpt_service, mock_openai_client) -> None:
    suggestions = await gpt_service.suggest_competitor_domains("x.com", ["a.com", "b.com"])

    assert suggestions == ["rival.com", "other-shop.io"]
    call_args = mock_openai_client.chat.completions.create.call_args
    assert call_args.kwargs["model"] == "test-model"
    assert "suggest 3 similar" in call_args.kwargs["messages"][0]["content"]


@pytest.mark.asyncio
async def test_suggest_competitor_domains_handles_fragment_response(gpt_service, mock_openai_client) -> None:
    mock_openai_client.chat.completions.create = AsyncMock(
        return_value=make_completion([{"text": "One.com, two.com"}, {"text": "three.com"}])
    )

    suggestions = await gpt_service.suggest_competitor_domains("x.com")

    assert suggestions == ["one.com", "two.com", "three.com"]


@pytest.mark.asyncio
async def test_suggest_competitor_domains_raises_on_api_error(gpt_service, mock_openai_client) -> None:
    mock_openai_client.chat.completions.create = AsyncMock(side_effect=Exception("API Error"))

    with pytest.raises(DiscoveryError):
        await gpt_service.suggest_competitor_domains("x.com")


@pytest.mark.asyncio
async def test_suggest_competitor_domains_raises_without_client() -> None:
    service = GPTService(client=None)
    service.client = None

    with pytest.raises(DiscoveryError):
        await service.suggest_competitor_domains("x.com")


@pytest.mark.asyncio
async def test_suggest_competitor_domains_raises_on_empty_choices(gpt_service, mock_openai_client) -> None:
    empty = make_completion("unused")
    empty.choices = []
    mock_openai_client.chat.completions.create = AsyncMock(return_value=empty)

    with pytest.raises(DiscoveryError):
        await gpt_service.suggest_competitor_domains("x.com")


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["", None, " , ,", []])
async def test_suggest_competitor_domains_raises_on_empty_reply(
    gpt_service, mock_openai_client, content
) -> None:
    mock_openai_client.chat.completions.create = AsyncMock(return_value=make_completion(content))

    with pytest.raises(DiscoveryError):
        await gpt_service.suggest_competitor_domains("x.com")


@pytest.mark.asyncio
async def test_suggest_competitor_domains_wraps_unexpected_content(gpt_service, mock_openai_client) -> None:
    mock_openai_client.chat.completions.create = AsyncMock(return_value=make_completion(42))

    with pytest.raises(DiscoveryError):
        await gpt_service.suggest_competitor_domains("x.com")
