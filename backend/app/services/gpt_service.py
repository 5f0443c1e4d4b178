"""
GPT Service for suggesting competitor domains
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Union

from loguru import logger
from openai import AsyncOpenAI

from app.core.config import settings
from app.core.exceptions import DiscoveryError

SUGGESTIONS_WITH_KNOWN = 3
SUGGESTIONS_FROM_MARKET = 5


@dataclass(frozen=True)
class PlainText:
    """Completion body delivered as a single string"""

    text: str

    def as_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class FragmentList:
    """Completion body delivered as a list of content parts"""

    fragments: Sequence[str]

    def as_text(self) -> str:
        return ", ".join(self.fragments)


CompletionContent = Union[PlainText, FragmentList]


def resolve_completion_content(content: Any) -> CompletionContent:
    """
    Resolve a raw message body into PlainText or FragmentList.

    Providers return either a string or a list of parts, where each part is a
    mapping or object exposing a ``text`` field.
    """
    if content is None:
        return PlainText("")
    if isinstance(content, str):
        return PlainText(content)

    fragments: List[str] = []
    for part in content:
        if isinstance(part, str):
            fragments.append(part)
            continue
        text = part.get("text") if isinstance(part, dict) else getattr(part, "text", None)
        if text:
            fragments.append(str(text))
    return FragmentList(tuple(fragments))


def build_competitor_prompt(domain: str, known_competitors: Sequence[str]) -> str:
    """Build the suggestion prompt; the requested count depends on known competitors"""
    if known_competitors:
        return (
            f"Based on these competitors: {', '.join(known_competitors)}, "
            f"suggest {SUGGESTIONS_WITH_KNOWN} similar e-commerce competitors for {domain}. "
            "Return only domain names separated by commas."
        )
    return (
        f"Suggest {SUGGESTIONS_FROM_MARKET} potential e-commerce competitors for {domain} "
        "based on market trends. Return only domain names separated by commas."
    )


def split_suggestions(text: str) -> List[str]:
    """Split a comma-separated reply into trimmed, lower-cased, non-empty fragments"""
    fragments = (fragment.strip().lower() for fragment in text.split(","))
    return [fragment for fragment in fragments if fragment]


class GPTService:
    """Service for suggesting competitor domains using an OpenAI-compatible model"""

    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        """Initialize GPT service with OpenAI client if API key is available"""
        self.model = model or settings.OPENAI_MODEL
        self.client = client

        if self.client is None and settings.OPENAI_API_KEY:
            self.client = AsyncOpenAI(
                api_key=settings.OPENAI_API_KEY,
                base_url=settings.OPENAI_BASE_URL,
                timeout=settings.HTTP_TIMEOUT,
            )
            logger.info(f"GPT Service initialized with model: {self.model}")
        elif self.client is None:
            logger.warning("OPENAI_API_KEY not configured. Competitor suggestions are unavailable.")

    async def close(self):
        if self.client is not None:
            await self.client.close()

    async def suggest_competitor_domains(
        self,
        domain: str,
        known_competitors: Sequence[str] = (),
    ) -> List[str]:
        """
        Ask the model for competitor domains of ``domain``.

        Args:
            domain: Normalized company domain
            known_competitors: Domains the user already tracks

        Returns:
            Trimmed, lower-cased domain fragments from the model reply

        Raises:
            DiscoveryError: if the model is unavailable, the call fails or the reply
                names no domains
        """
        if self.client is None:
            raise DiscoveryError("Text generation client is not configured")

        prompt = build_competitor_prompt(domain, known_competitors)
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=settings.OPENAI_TEMPERATURE,
                max_tokens=200,
            )
            choices = response.choices
            text = resolve_completion_content(choices[0].message.content).as_text() if choices else ""
        except Exception as e:
            logger.error(f"Failed to get competitor suggestions for {domain}: {e}")
            raise DiscoveryError(f"Competitor suggestion call failed: {e}") from e

        if not choices:
            raise DiscoveryError("Competitor suggestion call returned no choices")

        suggestions = split_suggestions(text)
        if not suggestions:
            logger.error(f"Model reply for {domain} contained no competitor domains")
            raise DiscoveryError("Competitor suggestion call returned no domains")
        logger.info(f"Model suggested {len(suggestions)} competitors for {domain}")
        return suggestions
